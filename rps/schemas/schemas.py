"""
Pydantic Schemas - Request/Response Validation

All API request and response schemas in one file for simplicity.
Field names are camelCase because that is what the stored documents
and the frontend use.
"""

from pydantic import BaseModel, ConfigDict, Field, StringConstraints
from typing import Annotated, Optional, List, Any
from datetime import datetime
from enum import Enum


# Required, non-blank string (surrounding whitespace is trimmed)
RequiredStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


# ============================================================
# ENUMS
# ============================================================

class Department(str, Enum):
    """
    Fixed department table. Member name is the department as clients
    send it, value is the numeric code used in registration numbers.
    """
    CSE = "001"
    EEE = "002"
    CE = "003"
    ME = "004"
    BBA = "005"
    ENG = "006"
    LAW = "007"
    ECO = "008"

    @classmethod
    def lookup(cls, name: str) -> Optional["Department"]:
        """Case-insensitive lookup by department name."""
        return cls.__members__.get(name.upper())


# ============================================================
# STUDENT SCHEMAS
# ============================================================

class StudentRegister(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    studentName: RequiredStr
    fatherName: RequiredStr
    motherName: RequiredStr
    session: RequiredStr
    dept: RequiredStr


class StudentResponse(BaseModel):
    registrationNumber: str
    studentName: str
    fatherName: str
    motherName: str
    session: str
    department: str
    createdAt: Optional[datetime] = None


class StudentRegisterResponse(BaseModel):
    message: str
    student: StudentResponse


# ============================================================
# RESULT SCHEMAS
# ============================================================

class ResultSubmit(BaseModel):
    """
    Result payload. Only the identifying fields are checked; everything
    else (the course list, remarks, ...) is stored as submitted.
    """
    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    regNo: RequiredStr
    studentName: RequiredStr
    dept: RequiredStr
    semester: RequiredStr


# ============================================================
# COURSE SCHEMAS
# ============================================================

class CourseCreate(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    semester: RequiredStr
    dept: RequiredStr
    subjects: List[Any] = Field(..., description="Ordered list of subject descriptors")


# ============================================================
# GENERIC SCHEMAS
# ============================================================

class DepartmentInfo(BaseModel):
    name: str
    code: str
