"""
Teacher Routes

POST /teacher/course - Set the subject list for a department and semester
GET  /teacher/course - Get the subject list for a department and semester
"""

import logging

from fastapi import APIRouter, Depends, Query

from rps.core.errors import InternalError, NotFoundError
from rps.services.mongo_service import STORE_ERRORS, RecordStore, get_store
from rps.schemas.schemas import CourseCreate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/teacher", tags=["Teachers"])


@router.post("/course")
def create_course(data: CourseCreate, store: RecordStore = Depends(get_store)):
    """
    Create or replace the course listing for (dept, semester).

    A second write for the same key replaces the subjects of the first.
    """
    try:
        course = store.courses.upsert(data.dept, data.semester, data.subjects)
    except STORE_ERRORS as e:
        raise InternalError(e)

    logger.info("Saved %d subjects for %s / %s", len(data.subjects), data.dept, data.semester)
    return {"message": "Course saved successfully", "course": course}


@router.get("/course")
def get_course(
    dept: str = Query(..., min_length=1),
    semester: str = Query(..., min_length=1),
    store: RecordStore = Depends(get_store),
):
    """Return only the subjects of the matching course listing."""
    try:
        course = store.courses.get(dept, semester)
    except STORE_ERRORS as e:
        raise InternalError(e)

    if course is None:
        raise NotFoundError("Course not found")
    return course.get("subjects", [])
