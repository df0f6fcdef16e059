"""
Department Routes

GET /departments - List the fixed department table
"""

from typing import List

from fastapi import APIRouter

from rps.schemas.schemas import Department, DepartmentInfo

router = APIRouter(prefix="/departments", tags=["Departments"])


@router.get("", response_model=List[DepartmentInfo])
async def list_departments():
    """Department names accepted at registration and their codes."""
    return [DepartmentInfo(name=dept.name, code=dept.value) for dept in Department]
