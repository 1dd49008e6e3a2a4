"""
Terminal Display Implementation.

This module handles all console/terminal output formatting.
It's the ONLY place where printing happens in the deanery package.

To create a different UI (web, PDF, etc.), create a new class with
the same method signatures but different output handling.
"""

from typing import Optional

from ..models import ControlType, GradingSheet, Group, Notification


class TerminalDisplay:
    """
    Pretty terminal output for the roster.

    ═══════════════════════════════════════════════════════════════════════════
    HOW TO REPLACE THIS UI
    ═══════════════════════════════════════════════════════════════════════════

    1. FOR WEB UI:
       Create a WebDisplay class with the same method signatures.
       Instead of print(), return HTML or render templates.

    2. FOR PRINTED SHEETS:
       Create a SheetExporter that writes each GradingSheet to a file.

    ═══════════════════════════════════════════════════════════════════════════
    """

    # ANSI color codes for terminal styling
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    RED = "\033[91m"
    CYAN = "\033[96m"
    WHITE = "\033[97m"

    BG_GREEN = "\033[42m"
    BG_RED = "\033[41m"

    CONTROL_LABELS = {
        ControlType.PASS: "pass/fail",
        ControlType.EXAM: "exam",
    }

    @classmethod
    def print_header(cls, title: str):
        """Print a major section header with decorative borders."""
        width = 70
        print()
        print(f"{cls.BOLD}{cls.CYAN}{'═' * width}{cls.RESET}")
        print(f"{cls.BOLD}{cls.CYAN}  {title}{cls.RESET}")
        print(f"{cls.BOLD}{cls.CYAN}{'═' * width}{cls.RESET}")

    @classmethod
    def print_subheader(cls, title: str):
        """Print a subsection header."""
        print()
        print(f"{cls.BOLD}{cls.WHITE}  ── {title} ──{cls.RESET}")

    @classmethod
    def control_label(cls, control: ControlType) -> str:
        return f"{control.value} ({cls.CONTROL_LABELS[control]})"

    @classmethod
    def print_groups(cls, groups, selected_id: Optional[int] = None):
        cls.print_header("GROUPS")
        if not groups:
            print(f"  {cls.DIM}(no groups){cls.RESET}")
            return

        for i, group in enumerate(groups, 1):
            marker = f"{cls.GREEN}▶{cls.RESET}" if group.id == selected_id else " "
            count = len(group.students)
            print(f"  {marker} {i:>2}. {cls.BOLD}{group.name:<30}{cls.RESET} "
                  f"{cls.DIM}{count} student(s){cls.RESET}")

    @classmethod
    def print_disciplines(cls, disciplines):
        cls.print_header("DISCIPLINES")
        if not disciplines:
            print(f"  {cls.DIM}(no disciplines){cls.RESET}")
            return

        for i, discipline in enumerate(disciplines, 1):
            print(f"    {i:>2}. {discipline.name:<40} {cls.control_label(discipline.control)}")

    @classmethod
    def print_grading_sheet(cls, sheet: GradingSheet):
        """
        Print one discipline's table.

        Layout:
            ── Math (экзамен) ──
              №   STUDENT                                   GRADE
              --------------------------------------------------
               1  Ivanov                                    ____
        """
        cls.print_subheader(f"{sheet.discipline.name} ({cls.control_label(sheet.discipline.control)})")
        print(f"\n  {cls.BOLD}{'№':>3}  {'STUDENT':<40} {'GRADE'}{cls.RESET}")
        print(f"  {cls.DIM}{'-' * 52}{cls.RESET}")

        if not sheet.rows:
            print(f"  {cls.DIM}(no students){cls.RESET}")
            return

        for row in sheet.rows:
            print(f"  {row.number:>3}  {row.student.name:<40} ____")

    @classmethod
    def print_grading_sheets(cls, group: Group, sheets):
        cls.print_header(f"GRADING SHEETS: {group.name.upper()}")
        if not sheets:
            print(f"  {cls.DIM}(no disciplines to print){cls.RESET}")
            return
        for sheet in sheets:
            cls.print_grading_sheet(sheet)

    @classmethod
    def print_notification(cls, notification: Optional[Notification]):
        if notification is None:
            return
        if notification.is_error:
            badge = f"{cls.BG_RED}{cls.WHITE} ✗ ERROR {cls.RESET}"
        else:
            badge = f"{cls.BG_GREEN}{cls.WHITE} ✓ OK {cls.RESET}"
        print(f"\n  {badge} {notification.text}")
