"""
Student Routes

POST /student/register - Register a student, generating the registration number
POST /student/result   - Submit a semester result
GET  /student/result   - Fetch a semester result by regNo and semester
"""

import logging

from fastapi import APIRouter, Depends, Query
from pymongo.errors import DuplicateKeyError

from rps.core.errors import ConflictError, InternalError, NotFoundError
from rps.services.grading import apply_grades
from rps.services.mongo_service import STORE_ERRORS, RecordStore, get_store
from rps.services.registration import generate_registration_number, resolve_department
from rps.schemas.schemas import StudentRegister, StudentRegisterResponse, ResultSubmit

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/student", tags=["Students"])


@router.post("/register", response_model=StudentRegisterResponse)
def register_student(data: StudentRegister, store: RecordStore = Depends(get_store)):
    """
    Register a student.

    The (studentName, fatherName, motherName) triple identifies a student;
    registering the same triple again is rejected with the existing number.
    """
    resolve_department(data.dept)

    try:
        existing = store.students.find_by_names(data.studentName, data.fatherName, data.motherName)
        if existing:
            logger.info("Duplicate registration for %s (%s)", data.studentName, existing["registrationNumber"])
            raise ConflictError(
                "Student already registered",
                existingRegNo=existing["registrationNumber"],
            )

        reg_no = generate_registration_number(store.students, data.dept, data.session)
        student = store.students.insert({
            "registrationNumber": reg_no,
            "studentName": data.studentName,
            "fatherName": data.fatherName,
            "motherName": data.motherName,
            "session": data.session,
            "department": data.dept,
        })
    except DuplicateKeyError:
        # Another student already holds the generated number: a concurrent
        # registration, or the same department sent in a different case
        logger.warning("Registration number %s already assigned", reg_no)
        raise ConflictError(
            f"Registration number {reg_no} is already assigned",
            registrationNumber=reg_no,
        )
    except STORE_ERRORS as e:
        raise InternalError(e)

    logger.info("Registered student %s", reg_no)
    return {"message": "Student registered successfully", "student": student}


@router.post("/result")
def submit_result(data: ResultSubmit, store: RecordStore = Depends(get_store)):
    """Store a semester result. Only one result per (regNo, semester)."""
    duplicate = ConflictError(
        f"Result for {data.regNo} in semester {data.semester} already exists",
        status_code=409,
    )

    try:
        if store.results.get(data.regNo, data.semester):
            raise duplicate
        result = store.results.insert(apply_grades(data.model_dump()))
    except DuplicateKeyError:
        raise duplicate
    except STORE_ERRORS as e:
        raise InternalError(e)

    logger.info("Stored result %s / %s", data.regNo, data.semester)
    return {"message": "Result submitted successfully", "result": result}


@router.get("/result")
def get_result(
    regNo: str = Query(..., min_length=1),
    semester: str = Query(..., min_length=1),
    store: RecordStore = Depends(get_store),
):
    """Fetch the full result document for a student and semester."""
    try:
        result = store.results.get(regNo, semester)
    except STORE_ERRORS as e:
        raise InternalError(e)

    if result is None:
        raise NotFoundError("Result not found")
    return result
