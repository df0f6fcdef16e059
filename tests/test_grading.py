import pytest

from rps.services.grading import apply_grades, compute_gpa, grade_for


@pytest.mark.parametrize("total, letter, point", [
    (100, "A+", 4.00),
    (80, "A+", 4.00),
    (79.5, "A", 3.75),
    (62, "B", 3.00),
    (40, "D", 2.00),
    (39, "F", 0.00),
    (0, "F", 0.00),
])
def test_grade_for(total, letter, point):
    assert grade_for(total) == (letter, point)


def test_compute_gpa_weights_by_credit():
    courses = [
        {"credit": 3, "gradePoint": 4.0},
        {"credit": 1, "gradePoint": 2.0},
    ]
    assert compute_gpa(courses) == 3.5


def test_compute_gpa_without_credits():
    assert compute_gpa([{"gradePoint": 4.0}]) is None


def test_apply_grades_ignores_non_numeric_totals():
    result = apply_grades({"courses": [{"code": "X", "total": "absent"}, "free text"]})

    assert result["courses"] == [{"code": "X", "total": "absent"}, "free text"]
    assert "gpa" not in result


def test_apply_grades_without_course_list():
    assert apply_grades({"regNo": "1"}) == {"regNo": "1"}
