"""
Registration number generation.

A registration number is ``<session><department code><sequence>``, where
the sequence is the number of students already registered under the
department plus one, zero-padded to four digits. For example the first
CSE student of session 2025 gets ``2025`` + ``001`` + ``0001``.

The count and the later insert are separate store calls, so two
registrations for the same department running at the same time can read
the same count. The unique index on registrationNumber makes the loser
fail instead of storing a duplicate.
"""

from rps.core.errors import ValidationError
from rps.schemas.schemas import Department
from rps.services.mongo_service import StudentService

SEQUENCE_WIDTH = 4


def resolve_department(name: str) -> Department:
    department = Department.lookup(name)
    if department is None:
        raise ValidationError(f"Unknown department '{name}'")
    return department


def format_registration_number(session: str, department: Department, sequence: int) -> str:
    return f"{session}{department.value}{sequence:0{SEQUENCE_WIDTH}d}"


def generate_registration_number(students: StudentService, department_name: str, session: str) -> str:
    """
    Next registration number for a department and session.

    The count is taken on the department value exactly as given, so
    "cse" and "CSE" are sequenced separately even though both map to
    the same code.
    """
    department = resolve_department(department_name)
    sequence = students.count_by_department(department_name) + 1
    return format_registration_number(session, department, sequence)
