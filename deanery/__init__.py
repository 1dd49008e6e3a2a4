"""
Dean's Office Roster Package
============================

Roster management for an academic administrative office: student groups,
disciplines with their form of control, and per-discipline grading sheets
with students in alphabetical order.

ARCHITECTURE OVERVIEW
---------------------

┌─────────────────────────────────────────────────────────────────────────┐
│                         ALGORITHM LAYER                                  │
│        (Pure logic - returns data structures, NO UI/printing)           │
│                                                                         │
│  ┌─────────────┐  ┌─────────────────┐  ┌─────────────────────────────┐  │
│  │ DataLoader  │  │  RosterParser   │  │        RosterStore          │  │
│  │  (I/O)      │  │  (parsing)      │  │  (groups, disciplines,      │  │
│  └─────────────┘  └─────────────────┘  │   selection, invariants)    │  │
│                                        └─────────────────────────────┘  │
│  ┌─────────────────────────┐  ┌─────────────────────────────────────┐  │
│  │      sort_students      │  │             Notifier                │  │
│  │  (BST alphabetical sort)│  │   (transient success/error msgs)    │  │
│  └─────────────────────────┘  └─────────────────────────────────────┘  │
└─────────────────────────────────────────────────────────────────────────┘
                                   │
                                   │ Returns dataclasses
                                   ▼
┌─────────────────────────────────────────────────────────────────────────┐
│                      PRESENTATION LAYER                                  │
│           (UI only - can be swapped without touching algorithm)         │
│                                                                         │
│  ┌─────────────────────────────────────────────────────────────────┐   │
│  │                    TerminalDisplay                               │   │
│  │  • Prints groups, disciplines and grading sheets                 │   │
│  └─────────────────────────────────────────────────────────────────┘   │
└─────────────────────────────────────────────────────────────────────────┘
                                   │
                                   ▼
┌─────────────────────────────────────────────────────────────────────────┐
│                          DeanOffice                                      │
│   (Orchestrator - one-time import, CRUD actions, notifications)         │
└─────────────────────────────────────────────────────────────────────────┘

PACKAGE STRUCTURE
-----------------

deanery/
├── __init__.py          # This file - main exports
├── config.py            # Configuration constants
├── errors.py            # RosterError hierarchy
├── notifier.py          # Notifier (transient messages)
├── office.py            # DeanOffice orchestrator
├── cli.py               # Command-line interface
│
├── models/              # Data classes and enums
│   ├── roster.py        # Student, Group, Discipline, ControlType
│   ├── sheet.py         # SheetRow, GradingSheet
│   └── notification.py  # Notification, NotificationKind
│
├── data/                # Bootstrap import
│   ├── loader.py        # DataLoader
│   └── parser.py        # RosterParser
│
├── engines/             # Core logic
│   ├── ordering.py      # SortingTree, sort_students
│   └── roster_store.py  # RosterStore
│
└── ui/                  # User interface implementations
    └── terminal.py      # TerminalDisplay

USAGE
-----

Basic usage:

    from deanery import DeanOffice

    office = DeanOffice()
    office.initialize("data/data.txt")

    group = office.store.groups[0]
    office.select_group(group.id)
    for sheet in office.grading_sheets():
        print(sheet.discipline.name, [row.student.name for row in sheet.rows])

Store only:

    from deanery import RosterStore, sort_students

    store = RosterStore()
    group = store.create_group("CS-101")
    store.select_group(group.id)
    store.create_student(group.id, "Petrov")
    store.create_student(group.id, "Ivanov")
    sort_students(store.selected_group.students)   # Ivanov, Petrov

Running from command line:

    python -m deanery [path-or-url]

"""

# Version
__version__ = "1.0.0"

# Main exports
from .office import DeanOffice
from .cli import main

# Model exports (for programmatic use)
from .models import (
    ControlType,
    Student,
    Group,
    Discipline,
    SheetRow,
    GradingSheet,
    Notification,
    NotificationKind,
)

# Engine exports
from .engines import RosterStore, SortingTree, sort_students, collation_key

# Data exports
from .data import DataLoader, RosterParser, ParsedRoster

# Errors
from .errors import (
    RosterError,
    ValidationError,
    SelectionError,
    DuplicateError,
    RosterImportError,
)

from .notifier import Notifier

# UI exports
from .ui import TerminalDisplay

__all__ = [
    # Version
    "__version__",
    # Main entry points
    "DeanOffice",
    "main",
    # Models
    "ControlType",
    "Student",
    "Group",
    "Discipline",
    "SheetRow",
    "GradingSheet",
    "Notification",
    "NotificationKind",
    # Engines
    "RosterStore",
    "SortingTree",
    "sort_students",
    "collation_key",
    # Data
    "DataLoader",
    "RosterParser",
    "ParsedRoster",
    # Errors
    "RosterError",
    "ValidationError",
    "SelectionError",
    "DuplicateError",
    "RosterImportError",
    # Notifications
    "Notifier",
    # UI
    "TerminalDisplay",
]
