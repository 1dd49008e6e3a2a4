"""
Dean's Office - Main Orchestrator.

This module contains the DeanOffice class that connects the roster store,
the bootstrap importer and the ordering engine to the presentation layer.

NOTE: Don't run this file directly. Run from the project directory:
    python3 -m deanery
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

from .data import DataLoader, RosterParser
from .engines import RosterStore, sort_students
from .errors import RosterError
from .models import Discipline, GradingSheet, Group, SheetRow, Student
from .notifier import Notifier
from .ui import TerminalDisplay

logger = logging.getLogger(__name__)


class DeanOffice:
    """
    Main interface for the roster system.

    ═══════════════════════════════════════════════════════════════════════════
    ROLE: ORCHESTRATOR
    ═══════════════════════════════════════════════════════════════════════════

    1. Runs the one-time bootstrap import (initialize)
    2. Forwards user actions to the RosterStore
    3. Turns every outcome into a success or error notification
    4. Builds grading sheets through the ordering engine
    5. Hands everything to the display for printing

    The store raises, the office reports: a RosterError never escapes an
    action method. It becomes an error notification and the action returns
    None/False, with the roster unchanged.

    TO CHANGE THE UI:
    -----------------
    Pass a different display object with the same method names, or ignore
    render() entirely and read `store`, `grading_sheets()` and
    `notifier.current` directly.

    ═══════════════════════════════════════════════════════════════════════════

    USAGE:
        office = DeanOffice()
        office.initialize("data/data.txt")

        group = office.add_group("CS-103")
        office.select_group(group.id)
        office.add_student(group.id, "Sidorov")

        for sheet in office.grading_sheets():
            ...
    """

    def __init__(self, store: Optional[RosterStore] = None,
                 loader: Optional[DataLoader] = None,
                 parser: Optional[RosterParser] = None,
                 notifier: Optional[Notifier] = None,
                 display=None):
        self.store = store if store is not None else RosterStore()
        self.loader = loader if loader is not None else DataLoader()
        self.parser = parser if parser is not None else RosterParser()
        self.notifier = notifier if notifier is not None else Notifier()
        self.display = display if display is not None else TerminalDisplay()
        # None = not run yet, then True/False for the import outcome
        self._import_outcome: Optional[bool] = None

    # =========================================================================
    #  BOOTSTRAP
    # =========================================================================

    @property
    def ready(self) -> bool:
        """True once initialize() has run, whatever its outcome."""
        return self._import_outcome is not None

    def initialize(self, source: Optional[Union[str, Path]] = None) -> bool:
        """
        Populate the roster from the bootstrap resource, once.

        On success the store is replaced wholesale. On any fetch or parse
        failure the store is left empty and a single error notification is
        emitted; there is no retry. Manual edits work either way.

        Calling it again does nothing and returns the first outcome.

        Returns:
            True if the import succeeded
        """
        if self._import_outcome is not None:
            logger.debug("Roster already initialized, skipping import")
            return self._import_outcome

        try:
            text = self.loader.fetch(source)
            parsed = self.parser.parse(text)
            self.store.replace(parsed.groups, parsed.disciplines)
        except RosterError as exc:
            self.store.clear()
            logger.error("Roster import failed: %s", exc.message)
            self.notifier.error(f"Could not load roster data: {exc.message}")
            self._import_outcome = False
            return False

        self.notifier.success(
            f"Roster loaded: {len(parsed.groups)} group(s), "
            f"{parsed.student_count} student(s), {len(parsed.disciplines)} discipline(s)"
        )
        self._import_outcome = True
        return True

    # =========================================================================
    #  GROUPS
    # =========================================================================

    def add_group(self, name: str) -> Optional[Group]:
        try:
            group = self.store.create_group(name)
        except RosterError as exc:
            self.notifier.error(exc.message)
            return None
        self.notifier.success(f"Group {group.name!r} added")
        return group

    def remove_group(self, group_id: int) -> bool:
        group = self.store.get_group(group_id)
        if not self.store.delete_group(group_id):
            self.notifier.error("No such group")
            return False
        self.notifier.success(f"Group {group.name!r} removed")
        return True

    def select_group(self, group_id: Optional[int]) -> Optional[Group]:
        try:
            group = self.store.select_group(group_id)
        except RosterError as exc:
            self.notifier.error(exc.message)
            return None
        return group

    # =========================================================================
    #  STUDENTS
    # =========================================================================

    def add_student(self, group_id: int, name: str) -> Optional[Student]:
        try:
            student = self.store.create_student(group_id, name)
        except RosterError as exc:
            self.notifier.error(exc.message)
            return None
        self.notifier.success(f"Student {student.name!r} added")
        return student

    def remove_student(self, group_id: int, student_id: int) -> bool:
        try:
            removed = self.store.delete_student(group_id, student_id)
        except RosterError as exc:
            self.notifier.error(exc.message)
            return False
        if not removed:
            self.notifier.error("No such student in this group")
            return False
        self.notifier.success("Student removed")
        return True

    # =========================================================================
    #  DISCIPLINES
    # =========================================================================

    def add_discipline(self, name: str, control) -> Optional[Discipline]:
        try:
            discipline = self.store.create_discipline(name, control)
        except RosterError as exc:
            self.notifier.error(exc.message)
            return None
        self.notifier.success(f"Discipline {discipline.name!r} added")
        return discipline

    def remove_discipline(self, discipline_id: int) -> bool:
        discipline = self.store.get_discipline(discipline_id)
        if not self.store.delete_discipline(discipline_id):
            self.notifier.error("No such discipline")
            return False
        self.notifier.success(f"Discipline {discipline.name!r} removed")
        return True

    # =========================================================================
    #  VIEWS
    # =========================================================================

    def sorted_students(self, group_id: Optional[int] = None) -> List[Student]:
        """Students of a group (default: the selected one) in alphabetical order."""
        if group_id is None:
            group = self.store.selected_group
        else:
            group = self.store.get_group(group_id)
        if group is None:
            return []
        return sort_students(group.students)

    def grading_sheets(self) -> List[GradingSheet]:
        """
        One grading sheet per discipline for the selected group.

        Disciplines are not linked to groups: every discipline gets a sheet
        for whichever group is selected. No selection, no sheets.
        """
        group = self.store.selected_group
        if group is None:
            return []

        rows = tuple(
            SheetRow(number=i, student=student)
            for i, student in enumerate(sort_students(group.students), 1)
        )
        return [
            GradingSheet(group=group, discipline=discipline, rows=rows)
            for discipline in self.store.disciplines
        ]

    def render(self):
        """Print the whole roster view: lists, sheets, current notification."""
        selected = self.store.selected_group
        self.display.print_groups(self.store.groups, selected.id if selected else None)
        self.display.print_disciplines(self.store.disciplines)
        if selected is not None:
            self.display.print_grading_sheets(selected, self.grading_sheets())
        self.display.print_notification(self.notifier.current)
