"""
Letter grade scale and semester GPA.

Submitted course results may leave out the letter grade and grade point;
when a numeric total is present they are filled in from GRADE_SCALE.
Values the client did send are never overwritten.
"""

from typing import List, Optional, Tuple

# (minimum total, letter grade, grade point), highest band first
GRADE_SCALE: Tuple[Tuple[float, str, float], ...] = (
    (80, "A+", 4.00),
    (75, "A", 3.75),
    (70, "A-", 3.50),
    (65, "B+", 3.25),
    (60, "B", 3.00),
    (55, "B-", 2.75),
    (50, "C+", 2.50),
    (45, "C", 2.25),
    (40, "D", 2.00),
    (0, "F", 0.00),
)


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def grade_for(total: float) -> Tuple[str, float]:
    """Letter grade and grade point for a course total out of 100."""
    for minimum, letter, point in GRADE_SCALE:
        if total >= minimum:
            return letter, point
    return "F", 0.00


def compute_gpa(courses: List[dict]) -> Optional[float]:
    """Credit-weighted GPA, or None when no course has both credit and grade point."""
    credits = 0.0
    points = 0.0
    for course in courses:
        credit = course.get("credit")
        point = course.get("gradePoint")
        if _is_number(credit) and _is_number(point) and credit > 0:
            credits += credit
            points += credit * point
    if not credits:
        return None
    return round(points / credits, 2)


def apply_grades(result: dict) -> dict:
    """Fill in missing grade fields of result["courses"] and the semester gpa."""
    courses = result.get("courses")
    if not isinstance(courses, list):
        return result

    graded = []
    for course in courses:
        if isinstance(course, dict):
            total = course.get("total")
            if _is_number(total) and ("grade" not in course or "gradePoint" not in course):
                letter, point = grade_for(total)
                course = dict(course)
                course.setdefault("grade", letter)
                course.setdefault("gradePoint", point)
        graded.append(course)
    result["courses"] = graded

    if "gpa" not in result:
        gpa = compute_gpa([c for c in graded if isinstance(c, dict)])
        if gpa is not None:
            result["gpa"] = gpa
    return result
