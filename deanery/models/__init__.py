"""
Data models for the roster system.

This package contains all dataclasses and enums used throughout the system.
These serve as "contracts" between different parts of the system.
"""

from .roster import ControlType, Student, Group, Discipline
from .sheet import SheetRow, GradingSheet
from .notification import Notification, NotificationKind

__all__ = [
    # Roster models
    "ControlType",
    "Student",
    "Group",
    "Discipline",
    # Sheet models
    "SheetRow",
    "GradingSheet",
    # Notifications
    "Notification",
    "NotificationKind",
]
