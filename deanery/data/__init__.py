"""
Data loading and parsing module.

This package handles fetching and parsing the bootstrap roster resource.
"""

from .loader import DataLoader
from .parser import RosterParser, ParsedRoster

__all__ = ["DataLoader", "RosterParser", "ParsedRoster"]
