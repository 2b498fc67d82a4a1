"""
Clue State Machine

Each clue moves HIDDEN -> QUESTION -> ANSWER and stays at ANSWER. Cells are
addressed by (category_index, clue_index); nothing here knows about rendering.
"""

from typing import Any, Optional

from ..config.game_settings import HIDDEN_CELL_TEXT
from ..exceptions import AddressingError
from ..models.board import Board, Clue, RevealResult, RevealState

_NEXT_STATE = {
    RevealState.HIDDEN: RevealState.QUESTION,
    RevealState.QUESTION: RevealState.ANSWER,
    RevealState.ANSWER: RevealState.ANSWER,
}


def _check_index(value: Any, size: int, name: str, category_index: Any, clue_index: Any):
    # bool is an int subclass; negative ints would wrap around
    if isinstance(value, bool) or not isinstance(value, int):
        raise AddressingError(category_index, clue_index, f"{name} index {value!r} is not an integer")
    if value < 0 or value >= size:
        raise AddressingError(category_index, clue_index, f"{name} index {value} out of range 0..{size - 1}")


def resolve_clue(board: Optional[Board], category_index: Any, clue_index: Any) -> Clue:
    """Return the clue at an address or raise AddressingError."""
    if board is None:
        raise AddressingError(category_index, clue_index, "no board is loaded")

    _check_index(category_index, board.category_count, "category", category_index, clue_index)
    category = board.categories[category_index]

    _check_index(clue_index, len(category.clues), "clue", category_index, clue_index)
    clue = category.clues[clue_index]
    if clue is None:
        raise AddressingError(category_index, clue_index, "address resolves to no clue")
    return clue


def cell_text(clue: Clue) -> str:
    """Text a view should show for the clue's current state."""
    if clue.reveal_state is RevealState.QUESTION:
        return clue.question
    if clue.reveal_state is RevealState.ANSWER:
        return clue.answer
    return HIDDEN_CELL_TEXT


def reveal(board: Optional[Board], category_index: Any, clue_index: Any) -> RevealResult:
    """
    Advance the addressed clue by one step.

    Revealing an ANSWER clue is a no-op reported with ``changed=False``.

    Raises:
        AddressingError: board missing or indices do not resolve; nothing changes
    """
    clue = resolve_clue(board, category_index, clue_index)

    current = clue.reveal_state
    next_state = _NEXT_STATE[current]
    changed = next_state is not current
    if changed:
        clue.reveal_state = next_state

    return RevealResult(
        category_index=category_index,
        clue_index=clue_index,
        state=clue.reveal_state,
        text=cell_text(clue),
        changed=changed,
    )
