# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Employee model."""

from __future__ import annotations

import uuid as uuid_lib
from typing import TYPE_CHECKING

from sqlalchemy import String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from shiftdesk.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from shiftdesk.models.shift import Shift


class Employee(Base, TimestampMixin):
    """An employee that shifts are scheduled for."""

    __tablename__ = "employees"

    id: Mapped[uuid_lib.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid_lib.uuid4,
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    employee_code: Mapped[str] = mapped_column(
        String(50),
        unique=True,
        nullable=False,
        index=True,
    )
    department: Mapped[str] = mapped_column(String(200), nullable=False)

    # No cascade: deleting an employee with shifts is refused by the service
    shifts: Mapped[list[Shift]] = relationship(
        "Shift",
        back_populates="employee",
        passive_deletes="all",
    )
