import pytest
from pymongo.errors import DuplicateKeyError

from rps.core.errors import ValidationError
from rps.schemas.schemas import Department
from rps.services.registration import (
    format_registration_number,
    generate_registration_number,
    resolve_department,
)


def test_format_pads_sequence_to_four_digits():
    assert format_registration_number("2025", Department.CSE, 1) == "20250010001"
    assert format_registration_number("2024", Department.EEE, 123) == "20240020123"


def test_resolve_department_is_case_insensitive():
    assert resolve_department("cse") is Department.CSE
    assert resolve_department("Bba") is Department.BBA


def test_resolve_department_rejects_unknown():
    with pytest.raises(ValidationError) as excinfo:
        resolve_department("Astrology")
    assert excinfo.value.status_code == 400


def test_sequence_counts_students_in_department(store):
    assert generate_registration_number(store.students, "CSE", "2025") == "20250010001"

    store.students.insert({"registrationNumber": "20250010001", "department": "CSE"})
    store.students.insert({"registrationNumber": "20250020001", "department": "EEE"})

    assert generate_registration_number(store.students, "CSE", "2025") == "20250010002"
    assert generate_registration_number(store.students, "EEE", "2026") == "20260020002"


def test_sequence_count_is_not_case_normalized(store):
    store.students.insert({"registrationNumber": "20250010001", "department": "CSE"})

    # "cse" maps to the CSE code but is counted separately
    assert generate_registration_number(store.students, "cse", "2025") == "20250010001"


def test_concurrent_registrations_can_read_the_same_count(store):
    # Known limitation: the counter is not atomic. Two requests that both
    # read the count before either inserts get the same number, and the
    # unique index rejects the second insert.
    first = generate_registration_number(store.students, "CSE", "2025")
    second = generate_registration_number(store.students, "CSE", "2025")
    assert first == second

    store.students.insert({"registrationNumber": first, "department": "CSE"})
    with pytest.raises(DuplicateKeyError):
        store.students.insert({"registrationNumber": second, "department": "CSE"})
