# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Login sessions referenced by the ``session`` cookie."""

from __future__ import annotations

import uuid as uuid_lib
from datetime import datetime, timedelta
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from shiftdesk.models.base import Base, utcnow

if TYPE_CHECKING:
    from shiftdesk.models.user import User


def new_token() -> str:
    """Opaque random token stored in the session cookie."""
    return str(uuid_lib.uuid4())


class Session(Base):
    """A logged-in user's session; valid until ``expires_at`` (naive UTC)."""

    __tablename__ = "sessions"

    id: Mapped[uuid_lib.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid_lib.uuid4,
    )
    token: Mapped[str] = mapped_column(
        String(36), unique=True, nullable=False, default=new_token
    )
    user_id: Mapped[uuid_lib.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        index=True,
        nullable=False,
    )
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)
    expires_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)

    user: Mapped[User] = relationship("User", back_populates="sessions")

    @classmethod
    def start(cls, user_id: uuid_lib.UUID, lifetime: timedelta) -> Session:
        """Build a session for a user that lasts ``lifetime`` from now."""
        now = utcnow()
        return cls(
            user_id=user_id,
            token=new_token(),
            created_at=now,
            expires_at=now + lifetime,
        )

    def is_expired(self, now: datetime | None = None) -> bool:
        """Whether the session has run out at ``now`` (default: current time)."""
        return self.expires_at <= (now or utcnow())
