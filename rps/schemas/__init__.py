"""
Schemas module - Request/Response schemas for API endpoints.
"""

from rps.schemas.schemas import (
    Department,
    StudentRegister,
    StudentResponse,
    StudentRegisterResponse,
    ResultSubmit,
    CourseCreate,
    DepartmentInfo,
)

__all__ = [
    "Department",
    "StudentRegister",
    "StudentResponse",
    "StudentRegisterResponse",
    "ResultSubmit",
    "CourseCreate",
    "DepartmentInfo",
]
