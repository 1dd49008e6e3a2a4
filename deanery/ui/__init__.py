"""
User Interface module.

This package contains the presentation layer. The roster logic never
prints; everything visible goes through a display class.
"""

from .terminal import TerminalDisplay

__all__ = ["TerminalDisplay"]
