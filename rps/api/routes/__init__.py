"""
API Routes - Combines all route modules into single router.
"""

from fastapi import APIRouter

from rps.api.routes.student_routes import router as student_router
from rps.api.routes.teacher_routes import router as teacher_router
from rps.api.routes.department_routes import router as department_router

# Main API router
api_router = APIRouter()

# Include all sub-routers
api_router.include_router(student_router)
api_router.include_router(teacher_router)
api_router.include_router(department_router)
