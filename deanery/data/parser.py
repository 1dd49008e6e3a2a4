"""
Roster text parsing.

This module turns the two-section bootstrap text into plain group and
discipline entries ready for RosterStore.replace().
"""

import logging
from dataclasses import dataclass, field

from ..config import (
    GROUPS_MARKER,
    DISCIPLINES_MARKER,
    FIELD_SEPARATOR,
    STUDENT_SEPARATOR,
)
from ..errors import RosterImportError
from ..models import ControlType

logger = logging.getLogger(__name__)


@dataclass
class ParsedRoster:
    """
    Parser output, shaped for RosterStore.replace().

    groups: [(group name, [student names]), ...]
    disciplines: [(discipline name, ControlType), ...]
    """
    groups: list = field(default_factory=list)
    disciplines: list = field(default_factory=list)

    @property
    def student_count(self) -> int:
        return sum(len(students) for _, students in self.groups)


class RosterParser:
    """
    Parses the bootstrap roster text.

    FORMAT:
    -------
        [GROUPS]
        CS-101|Ivanov,Petrov
        CS-102|
        [DISCIPLINES]
        Math|экзамен
        History|зачет

    LINE RULES:
    -----------
    - Lines are trimmed; blank lines are skipped.
    - A section marker switches the active section. Lines before the first
      marker belong to no section and are ignored.
    - Every other line is split on the FIRST "|" only.

    [GROUPS] lines:
    - Empty group name: line skipped.
    - No student segment (or an empty one): group with zero students.
    - Student names are split on "," and trimmed; empty names are dropped.

    [DISCIPLINES] lines:
    - The control token must be exactly "зачет" or "экзамен". Anything else
      (including extra spaces or a second "|") skips the line.
    - Empty discipline name: line skipped.

    DUPLICATES:
    -----------
    The store refuses case-insensitive duplicates, and one bad line must
    not cost the whole import. So a repeated group, discipline, or
    same-group student is dropped with a warning and the first one wins.
    """

    def parse(self, text: str) -> ParsedRoster:
        if not isinstance(text, str):
            raise RosterImportError(
                f"Roster data must be text, got {type(text).__name__}"
            )

        result = ParsedRoster()
        section = None
        seen_groups = set()
        seen_disciplines = set()

        for line_no, raw_line in enumerate(text.splitlines(), 1):
            line = raw_line.strip()
            if not line:
                continue

            if line == GROUPS_MARKER:
                section = "groups"
                continue
            if line == DISCIPLINES_MARKER:
                section = "disciplines"
                continue

            if section == "groups":
                entry = self._parse_group_line(line, line_no)
                if entry is None:
                    continue
                key = entry[0].casefold()
                if key in seen_groups:
                    logger.warning("Line %d: duplicate group %r skipped", line_no, entry[0])
                    continue
                seen_groups.add(key)
                result.groups.append(entry)

            elif section == "disciplines":
                entry = self._parse_discipline_line(line, line_no)
                if entry is None:
                    continue
                key = entry[0].casefold()
                if key in seen_disciplines:
                    logger.warning("Line %d: duplicate discipline %r skipped", line_no, entry[0])
                    continue
                seen_disciplines.add(key)
                result.disciplines.append(entry)

            else:
                logger.debug("Line %d: outside of any section, skipped", line_no)

        return result

    def _parse_group_line(self, line: str, line_no: int):
        name, _, students_raw = line.partition(FIELD_SEPARATOR)
        name = name.strip()
        if not name:
            logger.debug("Line %d: group without a name, skipped", line_no)
            return None

        students = []
        seen = set()
        for student_name in students_raw.split(STUDENT_SEPARATOR):
            student_name = student_name.strip()
            if not student_name:
                continue
            if student_name.casefold() in seen:
                logger.warning("Line %d: duplicate student %r in group %r skipped",
                               line_no, student_name, name)
                continue
            seen.add(student_name.casefold())
            students.append(student_name)

        return name, students

    def _parse_discipline_line(self, line: str, line_no: int):
        name, _, token = line.partition(FIELD_SEPARATOR)
        name = name.strip()
        control = ControlType.from_literal(token)
        if control is None:
            logger.debug("Line %d: unknown control type %r, skipped", line_no, token)
            return None
        if not name:
            logger.debug("Line %d: discipline without a name, skipped", line_no)
            return None
        return name, control
