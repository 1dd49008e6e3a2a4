"""
Roster engines.

This package contains the core logic: the in-memory roster store and the
alphabetical ordering engine.
"""

from .ordering import SortingTree, sort_students, collation_key
from .roster_store import RosterStore

__all__ = [
    "SortingTree",
    "sort_students",
    "collation_key",
    "RosterStore",
]
