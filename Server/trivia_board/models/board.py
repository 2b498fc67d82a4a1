"""
Board Data Models

Contains the board, category and clue structures and the tagged results
produced by validation and by the clue state machine.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Tuple


class RevealState(Enum):
    """What a clue cell is currently showing."""
    HIDDEN = "HIDDEN"
    QUESTION = "QUESTION"
    ANSWER = "ANSWER"


@dataclass
class Clue:
    """A question/answer pair. Only the clue state machine changes reveal_state."""
    question: str
    answer: str
    reveal_state: RevealState = RevealState.HIDDEN


@dataclass(frozen=True)
class Category:
    """A titled column of clues with a fixed length."""
    category_id: Any
    title: str
    clues: Tuple[Clue, ...]


@dataclass(frozen=True)
class Board:
    """The full set of categories for one game. Shape never changes."""
    categories: Tuple[Category, ...]

    @property
    def category_count(self) -> int:
        return len(self.categories)


@dataclass(frozen=True)
class CategoryRef:
    """One entry of the catalog's category listing."""
    category_id: Any
    title: str


@dataclass(frozen=True)
class ValidationResult:
    """Tagged outcome of validating a catalog response."""
    valid: bool
    reason: Optional[str] = None
    value: Any = field(default=None, compare=False)

    @classmethod
    def ok(cls, value: Any) -> 'ValidationResult':
        return cls(valid=True, value=value)

    @classmethod
    def invalid(cls, reason: str) -> 'ValidationResult':
        return cls(valid=False, reason=reason)


@dataclass(frozen=True)
class RevealResult:
    """Outcome of one reveal: the clue's state afterwards and the text to show."""
    category_index: int
    clue_index: int
    state: RevealState
    text: str
    changed: bool
