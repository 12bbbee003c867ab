"""
Genre Enumeration

The closed set of genres a book can be created or updated with.

Values are stored verbatim in the `genre` field of book documents.
"""

from enum import StrEnum


class Genre(StrEnum):
    """Genres accepted on book input."""

    ACTION = "ACTION"
    ADVENTURE = "ADVENTURE"
    BIOGRAPHY = "BIOGRAPHY"
    FANTASY = "FANTASY"
    HISTORY = "HISTORY"
    HORROR = "HORROR"
    MYSTERY = "MYSTERY"
    ROMANCE = "ROMANCE"
    SCI_FI = "SCI_FI"
