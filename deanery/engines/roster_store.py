"""
Roster Store.

This module holds the authoritative in-memory roster: groups with their
students, disciplines, and the current group selection.
"""

import itertools
import logging
from dataclasses import replace as replace_entity
from typing import Dict, Iterable, Optional, Sequence, Tuple

from ..errors import DuplicateError, SelectionError, ValidationError
from ..models import ControlType, Discipline, Group, Student

logger = logging.getLogger(__name__)


def _required_name(value, what: str) -> str:
    """Strip a user-supplied name, rejecting missing or blank input."""
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{what} name must not be empty")
    return value.strip()


def _same_name(a: str, b: str) -> bool:
    return a.casefold() == b.casefold()


class RosterStore:
    """
    In-memory roster with uniqueness invariants.

    ═══════════════════════════════════════════════════════════════════════════
    INVARIANTS
    ═══════════════════════════════════════════════════════════════════════════

    1. No two groups share a case-insensitive name.
    2. No two disciplines share a case-insensitive name.
    3. No two students in the same group share a case-insensitive name
       (the same name in different groups is fine).
    4. The selection is either None or the id of a group in the store.

    Every failing operation raises before touching state, so a caught
    RosterError always means "nothing changed".

    ═══════════════════════════════════════════════════════════════════════════

    IDS:
    ----
    One monotonic counter is shared by groups, students and disciplines,
    so an id is never reused for the lifetime of the store, not even after
    clear() or replace().

    Usage:
        store = RosterStore()
        group = store.create_group("CS-101")
        store.select_group(group.id)
        store.create_student(group.id, "Ivanov")
    """

    def __init__(self):
        # Dicts keep insertion order, which is the order groups are listed in
        self._groups: Dict[int, Group] = {}
        self._disciplines: Dict[int, Discipline] = {}
        self._selected_id: Optional[int] = None
        self._ids = itertools.count(1)

    # =========================================================================
    #  READ ACCESSORS
    # =========================================================================

    @property
    def groups(self) -> Tuple[Group, ...]:
        return tuple(self._groups.values())

    @property
    def disciplines(self) -> Tuple[Discipline, ...]:
        return tuple(self._disciplines.values())

    @property
    def selected_group(self) -> Optional[Group]:
        if self._selected_id is None:
            return None
        return self._groups[self._selected_id]

    def get_group(self, group_id: int) -> Optional[Group]:
        return self._groups.get(group_id)

    def get_discipline(self, discipline_id: int) -> Optional[Discipline]:
        return self._disciplines.get(discipline_id)

    def find_group_by_name(self, name: str) -> Optional[Group]:
        """Case-insensitive lookup, used by the CLI to resolve typed group names."""
        for group in self._groups.values():
            if _same_name(group.name, name.strip()):
                return group
        return None

    def find_discipline_by_name(self, name: str) -> Optional[Discipline]:
        for discipline in self._disciplines.values():
            if _same_name(discipline.name, name.strip()):
                return discipline
        return None

    # =========================================================================
    #  SELECTION
    # =========================================================================

    def select_group(self, group_id: Optional[int]) -> Optional[Group]:
        """
        Select a group, or clear the selection with None.

        Selecting an unknown id raises SelectionError and keeps the
        previous selection.
        """
        if group_id is None:
            self._selected_id = None
            return None
        if group_id not in self._groups:
            raise SelectionError(f"Group {group_id} does not exist")
        self._selected_id = group_id
        return self._groups[group_id]

    def _require_selected(self, group_id: int) -> Group:
        if self._selected_id is None or self._selected_id != group_id:
            raise SelectionError("Select the group before changing its students")
        return self._groups[group_id]

    # =========================================================================
    #  GROUPS
    # =========================================================================

    def create_group(self, name: str) -> Group:
        name = _required_name(name, "Group")
        if any(_same_name(g.name, name) for g in self._groups.values()):
            raise DuplicateError(f"Group {name!r} already exists")

        group = Group(id=next(self._ids), name=name)
        self._groups[group.id] = group
        logger.debug("Created group %s (%r)", group.id, group.name)
        return group

    def delete_group(self, group_id: int) -> bool:
        """
        Remove a group and all of its students.

        Returns False (and changes nothing) if the id is unknown.
        """
        group = self._groups.pop(group_id, None)
        if group is None:
            return False
        if self._selected_id == group_id:
            self._selected_id = None
        logger.debug("Deleted group %s with %d student(s)", group_id, len(group.students))
        return True

    # =========================================================================
    #  STUDENTS
    # =========================================================================

    def create_student(self, group_id: int, name: str) -> Student:
        group = self._require_selected(group_id)
        name = _required_name(name, "Student")
        # Only the owning group is checked: duplicates across groups are allowed
        if any(_same_name(s.name, name) for s in group.students):
            raise DuplicateError(f"Student {name!r} is already in group {group.name!r}")

        student = Student(id=next(self._ids), name=name)
        self._groups[group_id] = replace_entity(group, students=group.students + (student,))
        logger.debug("Added student %s (%r) to group %s", student.id, student.name, group_id)
        return student

    def delete_student(self, group_id: int, student_id: int) -> bool:
        group = self._require_selected(group_id)
        if group.find_student(student_id) is None:
            return False

        remaining = tuple(s for s in group.students if s.id != student_id)
        self._groups[group_id] = replace_entity(group, students=remaining)
        logger.debug("Removed student %s from group %s", student_id, group_id)
        return True

    # =========================================================================
    #  DISCIPLINES
    # =========================================================================

    def create_discipline(self, name: str, control) -> Discipline:
        name = _required_name(name, "Discipline")
        control = ControlType.parse(control)
        if any(_same_name(d.name, name) for d in self._disciplines.values()):
            raise DuplicateError(f"Discipline {name!r} already exists")

        discipline = Discipline(id=next(self._ids), name=name, control=control)
        self._disciplines[discipline.id] = discipline
        logger.debug("Created discipline %s (%r, %s)", discipline.id, name, control.name)
        return discipline

    def delete_discipline(self, discipline_id: int) -> bool:
        if self._disciplines.pop(discipline_id, None) is None:
            return False
        logger.debug("Deleted discipline %s", discipline_id)
        return True

    # =========================================================================
    #  BULK OPERATIONS
    # =========================================================================

    def replace(self, groups: Iterable[Tuple[str, Sequence[str]]],
                disciplines: Iterable[Tuple[str, ControlType]]):
        """
        Replace the whole roster, as done once by the bootstrap import.

        Args:
            groups: (group name, [student names]) pairs
            disciplines: (discipline name, ControlType) pairs

        The new roster is built and validated on the side and swapped in
        only if every entry passes, so a bad entry leaves the old roster
        untouched. The selection is cleared.
        """
        new_groups: Dict[int, Group] = {}
        for group_name, student_names in groups:
            group_name = _required_name(group_name, "Group")
            if any(_same_name(g.name, group_name) for g in new_groups.values()):
                raise DuplicateError(f"Group {group_name!r} already exists")

            students = []
            for student_name in student_names:
                student_name = _required_name(student_name, "Student")
                if any(_same_name(s.name, student_name) for s in students):
                    raise DuplicateError(
                        f"Student {student_name!r} is already in group {group_name!r}"
                    )
                students.append(Student(id=next(self._ids), name=student_name))

            group = Group(id=next(self._ids), name=group_name, students=tuple(students))
            new_groups[group.id] = group

        new_disciplines: Dict[int, Discipline] = {}
        for discipline_name, control in disciplines:
            discipline_name = _required_name(discipline_name, "Discipline")
            control = ControlType.parse(control)
            if any(_same_name(d.name, discipline_name) for d in new_disciplines.values()):
                raise DuplicateError(f"Discipline {discipline_name!r} already exists")
            discipline = Discipline(id=next(self._ids), name=discipline_name, control=control)
            new_disciplines[discipline.id] = discipline

        self._groups = new_groups
        self._disciplines = new_disciplines
        self._selected_id = None
        logger.debug("Roster replaced: %d group(s), %d discipline(s)",
                     len(new_groups), len(new_disciplines))

    def clear(self):
        """Reset to the empty initial state. Ids keep counting."""
        self._groups = {}
        self._disciplines = {}
        self._selected_id = None
