# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Employee schemas."""

import datetime
import uuid
from typing import Annotated

from pydantic import BaseModel, StringConstraints

Name = Annotated[
    str, StringConstraints(strip_whitespace=True, min_length=1, max_length=200)
]
EmployeeCode = Annotated[
    str, StringConstraints(strip_whitespace=True, min_length=1, max_length=50)
]


class EmployeeCreate(BaseModel):
    """Schema for creating an employee."""

    name: Name
    employee_code: EmployeeCode
    department: Name


class EmployeeUpdate(BaseModel):
    """Schema for updating an employee."""

    name: Name | None = None
    employee_code: EmployeeCode | None = None
    department: Name | None = None


class EmployeeSummary(BaseModel):
    """Employee display fields joined onto shift responses."""

    id: uuid.UUID
    name: str
    employee_code: str
    department: str

    model_config = {"from_attributes": True}


class EmployeeResponse(EmployeeSummary):
    """Schema for employee response."""

    created_at: datetime.datetime
    updated_at: datetime.datetime
