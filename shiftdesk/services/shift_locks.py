# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""In-process locks that serialise shift writes per employee and day."""

import threading
import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import date

SlotKey = tuple[uuid.UUID, date]


class ShiftSlotLocks:
    """One lock per (employee, date), created on demand.

    Holding the lock across "read existing shifts, validate, insert" keeps
    two concurrent requests from both passing the overlap check. Entries
    are dropped once no thread holds or waits on them.
    """

    def __init__(self) -> None:
        """Initialize the registry."""
        self._guard = threading.Lock()
        self._locks: dict[SlotKey, threading.Lock] = {}
        self._users: dict[SlotKey, int] = {}

    @contextmanager
    def hold(self, employee_id: uuid.UUID, shift_date: date) -> Iterator[None]:
        """Block until the slot is free, then hold it for the with-block."""
        key = (employee_id, shift_date)
        with self._guard:
            lock = self._locks.setdefault(key, threading.Lock())
            self._users[key] = self._users.get(key, 0) + 1

        lock.acquire()
        try:
            yield
        finally:
            lock.release()
            with self._guard:
                self._users[key] -= 1
                if self._users[key] == 0:
                    del self._users[key]
                    del self._locks[key]

    def __len__(self) -> int:
        with self._guard:
            return len(self._locks)


shift_slot_locks = ShiftSlotLocks()
