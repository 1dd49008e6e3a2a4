"""
Roster data models.

Contains the Student, Group and Discipline dataclasses and the ControlType
enum. All of them are immutable: the store swaps in updated copies instead
of mutating entities in place, so anything handed out by a read accessor
can never drift out of sync with the store's invariants.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

from ..config import PASS_LITERAL, EXAM_LITERAL
from ..errors import ValidationError


class ControlType(Enum):
    """
    Form of final control for a discipline.

    PASS: pass/fail credit ("зачет")
    EXAM: graded examination ("экзамен")

    The values are the literal tokens used by the import format.
    """
    PASS = PASS_LITERAL
    EXAM = EXAM_LITERAL

    @classmethod
    def from_literal(cls, token: str) -> Optional["ControlType"]:
        """Exact-match lookup of an import token. Returns None if unknown."""
        for member in cls:
            if member.value == token:
                return member
        return None

    @classmethod
    def parse(cls, value) -> "ControlType":
        """
        Resolve user input to a ControlType.

        Accepts a ControlType, one of the literal tokens, or a member name
        ("PASS"/"EXAM", any case). Anything else is a ValidationError.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            token = value.strip()
            member = cls.from_literal(token)
            if member is not None:
                return member
            if token.upper() in cls.__members__:
                return cls[token.upper()]
        raise ValidationError(
            f"Invalid control type {value!r}: expected {PASS_LITERAL!r} or {EXAM_LITERAL!r}"
        )


@dataclass(frozen=True)
class Student:
    """
    A single student. Identity is `id`; `name` is the display and sort key.

    A student always belongs to exactly one Group.
    """
    id: int
    name: str


@dataclass(frozen=True)
class Group:
    """
    A study group owning its students.

    `students` is kept in insertion order; display order comes from the
    ordering engine, never from this tuple.
    """
    id: int
    name: str
    students: Tuple[Student, ...] = field(default_factory=tuple)

    def find_student(self, student_id: int) -> Optional[Student]:
        for student in self.students:
            if student.id == student_id:
                return student
        return None


@dataclass(frozen=True)
class Discipline:
    """A course of study with its form of final control."""
    id: int
    name: str
    control: ControlType
