# core/config.py

"""
Program-wide constants for the Student Roster.

Holds the default data file, record limits, and the delimiters of the roster file format.
There are no environment variables or command-line flags; every tunable lives here.
"""

# === persistence ===

DEFAULT_FILENAME = "students.txt"

COMMENT_MARKER = "#"
FIELD_DELIMITER = "|"

FILE_HEADER_TITLE = "Student Record System Data File"
FILE_HEADER_FORMAT = "Format: roll|marks|name"

# === record limits ===

MIN_ROLL = 1
MAX_ROLL_INPUT = 99999

MIN_MARKS = 0
MAX_MARKS = 100

MAX_NAME_LENGTH = 100
DEFAULT_NAME = "Unnamed"

# === statistics ===

PASS_THRESHOLD = 40
