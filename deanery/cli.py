"""
Command-Line Interface for the Dean's Office roster.

This module provides the interactive menu. It reads user input, forwards
it to DeanOffice and re-renders the roster after every action.

NOTE: Don't run this file directly. Run from the project directory:
    python3 -m deanery [path-or-url-of-data.txt]
"""

import logging
import sys
from typing import Optional

from .config import LOG_LEVEL
from .office import DeanOffice
from .ui import TerminalDisplay

MENU = [
    ("1", "Show roster"),
    ("2", "Select group"),
    ("3", "Add group"),
    ("4", "Remove group"),
    ("5", "Add student to selected group"),
    ("6", "Remove student from selected group"),
    ("7", "Add discipline"),
    ("8", "Remove discipline"),
    ("0", "Quit"),
]


def _prompt(text: str) -> Optional[str]:
    """Read one line. Returns None on end of input."""
    try:
        return input(text).strip()
    except EOFError:
        return None


def _pick(items, answer: Optional[str], find_by_name=None):
    """
    Resolve a list number or a case-insensitive name to an item.

    Both groups and disciplines are listed with 1-based numbers, so the
    user can type either "2" or "CS-102". Names go through `find_by_name`
    when the store offers a lookup for that kind of item.
    """
    if not answer:
        return None
    if answer.isdecimal():
        index = int(answer) - 1
        return items[index] if 0 <= index < len(items) else None
    if find_by_name is not None:
        return find_by_name(answer)
    for item in items:
        if item.name.casefold() == answer.casefold():
            return item
    return None


def _select_group(office: DeanOffice):
    answer = _prompt("  Group number or name (empty to clear selection): ")
    if answer is None:
        return
    if not answer:
        office.select_group(None)
        return
    group = _pick(office.store.groups, answer, office.store.find_group_by_name)
    if group is None:
        office.notifier.error(f"No group {answer!r}")
        return
    office.select_group(group.id)


def _add_group(office: DeanOffice):
    name = _prompt("  New group name: ")
    if name is not None:
        office.add_group(name)


def _remove_group(office: DeanOffice):
    group = _pick(office.store.groups, _prompt("  Group number or name: "),
                  office.store.find_group_by_name)
    if group is None:
        office.notifier.error("No such group")
        return
    office.remove_group(group.id)


def _add_student(office: DeanOffice):
    group = office.store.selected_group
    if group is None:
        office.notifier.error("Select a group first")
        return
    name = _prompt(f"  Student full name for {group.name}: ")
    if name is not None:
        office.add_student(group.id, name)


def _remove_student(office: DeanOffice):
    group = office.store.selected_group
    if group is None:
        office.notifier.error("Select a group first")
        return
    # Numbers follow the alphabetical sheet order, not insertion order
    student = _pick(office.sorted_students(), _prompt("  Student number or name: "))
    if student is None:
        office.notifier.error("No such student in this group")
        return
    office.remove_student(group.id, student.id)


def _add_discipline(office: DeanOffice):
    name = _prompt("  Discipline name: ")
    if name is None:
        return
    control = _prompt("  Control type (зачет/экзамен) [экзамен]: ")
    if control is None:
        return
    office.add_discipline(name, control or "экзамен")


def _remove_discipline(office: DeanOffice):
    discipline = _pick(office.store.disciplines, _prompt("  Discipline number or name: "),
                       office.store.find_discipline_by_name)
    if discipline is None:
        office.notifier.error("No such discipline")
        return
    office.remove_discipline(discipline.id)


ACTIONS = {
    "2": _select_group,
    "3": _add_group,
    "4": _remove_group,
    "5": _add_student,
    "6": _remove_student,
    "7": _add_discipline,
    "8": _remove_discipline,
}


def _print_menu():
    print(f"\n{TerminalDisplay.BOLD}Actions:{TerminalDisplay.RESET}")
    for key, label in MENU:
        print(f"  {key}. {label}")


def main(argv=None, office: Optional[DeanOffice] = None) -> int:
    """
    Interactive roster session.

    The optional first argument is the bootstrap resource (a file path or
    an http(s) URL); without it DEANERY_DATA_SOURCE or data/data.txt is used.
    End of input quits like "0".
    """
    logging.basicConfig(level=LOG_LEVEL, format="%(levelname)s %(name)s: %(message)s")
    argv = sys.argv[1:] if argv is None else argv
    office = office if office is not None else DeanOffice()

    print(f"\n{TerminalDisplay.BOLD}{TerminalDisplay.CYAN}")
    print("╔══════════════════════════════════════════════════════════════════╗")
    print("║         DEAN'S OFFICE - GRADING SHEET GENERATOR                  ║")
    print("╚══════════════════════════════════════════════════════════════════╝")
    print(f"{TerminalDisplay.RESET}")

    office.initialize(argv[0] if argv else None)
    office.render()

    while True:
        _print_menu()
        choice = _prompt(f"{TerminalDisplay.BOLD}Select action: {TerminalDisplay.RESET}")
        if choice is None or choice == "0":
            return 0
        if choice == "1":
            office.render()
            continue

        action = ACTIONS.get(choice)
        if action is None:
            print(f"  {TerminalDisplay.YELLOW}Unknown action {choice!r}{TerminalDisplay.RESET}")
            continue
        action(office)
        office.render()


if __name__ == "__main__":
    sys.exit(main())
