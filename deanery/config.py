"""
Configuration constants for the dean's office roster.

This module contains all configuration values and constants used throughout
the roster system. Centralizing these makes it easy to adjust behavior
without touching the store or the importer.
"""

import os
from pathlib import Path

# =============================================================================
# FILE PATHS
# =============================================================================

# Base data directory (relative to this file's location)
BASE_DIR = Path(__file__).parent.parent
DATA_DIR = BASE_DIR / "data"
DEFAULT_DATA_FILE = DATA_DIR / "data.txt"

# The bootstrap resource can be a local path or an http(s) URL.
DATA_SOURCE = os.getenv("DEANERY_DATA_SOURCE", str(DEFAULT_DATA_FILE))


# =============================================================================
# IMPORT FORMAT
# =============================================================================
# The bootstrap resource is a two-section text file:
#
#   [GROUPS]
#   CS-101|Ivanov,Petrov
#   [DISCIPLINES]
#   Math|экзамен
#
# Control literals are the exact tokens accepted in the [DISCIPLINES] section.

GROUPS_MARKER = "[GROUPS]"
DISCIPLINES_MARKER = "[DISCIPLINES]"
FIELD_SEPARATOR = "|"
STUDENT_SEPARATOR = ","

PASS_LITERAL = "зачет"
EXAM_LITERAL = "экзамен"


# =============================================================================
# RUNTIME
# =============================================================================

# Seconds a success/error notification stays visible
NOTIFICATION_TTL = 3.0

# Seconds before the bootstrap fetch gives up (single attempt, no retries)
FETCH_TIMEOUT = 10.0

LOG_LEVEL = os.getenv("DEANERY_LOG_LEVEL", "WARNING").upper()
