# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Shift model."""

from __future__ import annotations

import datetime
import uuid as uuid_lib
from typing import TYPE_CHECKING

from sqlalchemy import Date, ForeignKey, Index, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from shiftdesk.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from shiftdesk.models.employee import Employee


class Shift(Base, TimestampMixin):
    """A scheduled work interval for one employee on one calendar date.

    Times are wall-clock ``HH:mm`` strings on the same day; overnight
    shifts are not modelled.
    """

    __tablename__ = "shifts"
    __table_args__ = (Index("ix_shifts_employee_id_date", "employee_id", "date"),)

    id: Mapped[uuid_lib.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid_lib.uuid4,
    )
    employee_id: Mapped[uuid_lib.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("employees.id", ondelete="RESTRICT"),
        nullable=False,
    )
    date: Mapped[datetime.date] = mapped_column(Date, nullable=False)
    start_time: Mapped[str] = mapped_column(String(5), nullable=False)
    end_time: Mapped[str] = mapped_column(String(5), nullable=False)

    # Relationships
    employee: Mapped[Employee] = relationship("Employee", back_populates="shifts")
