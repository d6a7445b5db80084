"""Pydantic schemas for employees."""

import enum
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class EmployeeStatus(str, enum.Enum):
    """Directory listing filter."""

    ACTIVE = "active"
    INACTIVE = "inactive"
    ALL = "all"


class EmployeeBase(BaseModel):
    """Base schema for employees."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1, max_length=120)
    employee_number: str = Field(..., min_length=1, max_length=32, pattern=r"^\d+$")


class EmployeeCreate(EmployeeBase):
    """Schema for creating an employee."""

    pass


class EmployeeUpdate(EmployeeBase):
    """Schema for updating an employee (full replacement of editable fields)."""

    pass


class EmployeeResponse(EmployeeBase):
    """Schema for employee response."""

    id: str
    active: bool
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
