"""
Grading sheet data models.

A grading sheet is what the dean's office prints for a group: one table per
discipline, students in alphabetical order, numbered from 1.
"""

from dataclasses import dataclass

from .roster import Discipline, Group, Student


@dataclass(frozen=True)
class SheetRow:
    number: int       # 1-based position in the sheet
    student: Student


@dataclass(frozen=True)
class GradingSheet:
    """
    One discipline's table for the selected group.

    Example for group CS-101 and discipline Math:
        group: Group(name="CS-101", ...)
        discipline: Discipline(name="Math", control=ControlType.EXAM)
        rows: (SheetRow(1, Ivanov), SheetRow(2, Petrov))
    """
    group: Group
    discipline: Discipline
    rows: tuple
