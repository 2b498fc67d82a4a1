"""
Trivia Board Exceptions

Error taxonomy shared by the catalog client, board acquisition and the
clue state machine.
"""

from typing import Optional


class TriviaBoardError(Exception):
    """Base class for all trivia board errors."""


class TransientFetchError(TriviaBoardError):
    """
    A single catalog call failed or returned malformed data.

    Recovered inside board acquisition by skipping the candidate.
    """

    def __init__(self, message: str, category_id: Optional[int] = None):
        super().__init__(message)
        self.category_id = category_id


class AcquisitionError(TriviaBoardError):
    """Not enough valid categories were found within the attempt budget."""

    def __init__(self, found: int, needed: int):
        super().__init__(f"Found {found} valid categories, needed {needed}")
        self.found = found
        self.needed = needed


class AddressingError(TriviaBoardError):
    """A reveal was requested against a missing board or clue."""

    def __init__(self, category_index, clue_index, reason: str):
        super().__init__(f"Cannot address clue ({category_index}, {clue_index}): {reason}")
        self.category_index = category_index
        self.clue_index = clue_index
        self.reason = reason
