# models/sort_order.py

"""
Holds the closed set of orders a Roster can be sorted by.
"""

from enum import Enum


class SortOrder(str, Enum):
    MARKS_ASCENDING = "Marks (ascending)"
    MARKS_DESCENDING = "Marks (descending)"
    NAME_ASCENDING = "Name (alphabetical)"
