"""Student records: reading, ranking by marks and swapping sections."""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable
from dataclasses import dataclass

_SHORT_RECORD = 4
_FULL_RECORD = 6


@dataclass(frozen=True)
class Student:
    """One student with class, section, id and marks in two subjects."""

    name: str
    class_no: int
    section: str
    student_id: int
    math_marks: int = 0
    eng_marks: int = 0

    def __post_init__(self) -> None:
        if len(self.section) != 1:
            raise ValueError(f"section must be one character, got {self.section!r}")

    @property
    def total_marks(self) -> int:
        """Sum of the marks in both subjects."""
        return self.math_marks + self.eng_marks


def parse_students(text: str) -> list[Student]:
    """Read a count followed by that many student records.

    Each record is either name, class, section, id or the same four fields
    followed by math and English marks. Raises ValueError on malformed input.
    """
    tokens = text.split()
    if not tokens:
        raise ValueError("missing student count")
    count = int(tokens[0])
    if count < 0:
        raise ValueError("student count must not be negative")
    fields = tokens[1:]
    if count == 0:
        return []
    width, extra = divmod(len(fields), count)
    if extra or width not in (_SHORT_RECORD, _FULL_RECORD):
        raise ValueError(
            f"expected {count} records of {_SHORT_RECORD} or {_FULL_RECORD} fields"
        )
    students = []
    for start in range(0, len(fields), width):
        name, class_no, section, student_id, *marks = fields[start : start + width]
        students.append(
            Student(
                name,
                int(class_no),
                section,
                int(student_id),
                *(int(mark) for mark in marks),
            )
        )
    return students


def sort_by_marks(students: Iterable[Student]) -> list[Student]:
    """Return students by total marks, highest first, ties broken by lower id."""
    return sorted(students, key=lambda s: (-s.total_marks, s.student_id))


def swap_sections(students: Iterable[Student]) -> list[Student]:
    """Return the students with sections exchanged between mirrored positions."""
    items = list(students)
    sections = [student.section for student in reversed(items)]
    return [
        dataclasses.replace(student, section=section)
        for student, section in zip(items, sections)
    ]