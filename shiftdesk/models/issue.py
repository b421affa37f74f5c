# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Issue model for problems reported against shifts."""

from __future__ import annotations

import uuid as uuid_lib
from datetime import datetime
from typing import TYPE_CHECKING, Any

from sqlalchemy import (
    JSON,
    Boolean,
    DateTime,
    Enum,
    ForeignKey,
    Index,
    String,
    Text,
    Uuid,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from shiftdesk.models.base import Base, TimestampMixin
from shiftdesk.models.enums import IssuePriority, IssueStatus

if TYPE_CHECKING:
    from shiftdesk.models.shift import Shift
    from shiftdesk.models.user import User


class Issue(Base, TimestampMixin):
    """Issue reported by a user, optionally about a specific shift.

    ``shift_data`` is a snapshot of the shift taken when the issue is
    created, so the report stays readable after the shift is edited or
    deleted.
    """

    __tablename__ = "issues"
    __table_args__ = (
        Index("ix_issues_status_is_read", "status", "is_read"),
        Index("ix_issues_created_by_id_status", "created_by_id", "status"),
    )

    id: Mapped[uuid_lib.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid_lib.uuid4,
    )
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    status: Mapped[IssueStatus] = mapped_column(
        Enum(IssueStatus),
        default=IssueStatus.OPEN,
        nullable=False,
    )
    priority: Mapped[IssuePriority] = mapped_column(
        Enum(IssuePriority),
        default=IssuePriority.MEDIUM,
        nullable=False,
    )
    created_by_id: Mapped[uuid_lib.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )
    resolved_by_id: Mapped[uuid_lib.UUID | None] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
    )
    resolved_at: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)
    admin_notes: Mapped[str] = mapped_column(Text, default="", nullable=False)
    admin_response: Mapped[str] = mapped_column(Text, default="", nullable=False)
    is_read: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    shift_id: Mapped[uuid_lib.UUID | None] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("shifts.id", ondelete="SET NULL"),
        nullable=True,
    )
    shift_data: Mapped[dict[str, Any] | None] = mapped_column(JSON, nullable=True)
    corrected_shift_data: Mapped[dict[str, Any] | None] = mapped_column(
        JSON,
        nullable=True,
    )

    # Relationships
    created_by: Mapped[User] = relationship("User", foreign_keys=[created_by_id])
    resolved_by: Mapped[User | None] = relationship(
        "User",
        foreign_keys=[resolved_by_id],
    )
    shift: Mapped[Shift | None] = relationship("Shift")
