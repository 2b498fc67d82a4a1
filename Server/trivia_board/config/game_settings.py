"""
Board Configuration Constants Module

Defines the shape of a trivia board and the limits of board acquisition.
All board parameters are centralized here to enable easy modification.
"""

from typing import Final

CATEGORY_COUNT: Final[int] = 6
"""
Number of categories (columns) on a board.
Type: Final[int] - Immutable to prevent accidental modification
"""

CLUES_PER_CATEGORY: Final[int] = 5
"""
Number of clues (rows) drawn for every category.
Type: Final[int] - Immutable to prevent accidental modification
"""

MAX_ACQUISITION_ATTEMPTS: Final[int] = 100
"""
Outer retry budget for board acquisition before giving up.
"""

CATALOG_CANDIDATE_COUNT: Final[int] = 100
"""
How many candidate categories are requested from the catalog per attempt.
"""

HIDDEN_CELL_TEXT: Final[str] = "?"

CATALOG_BASE_URL: Final[str] = "https://projects.springboard.com/jeopardy/api"

ACQUISITION_FAILED_MESSAGE: Final[str] = "Could not load game, please retry."


def validate_board_settings(category_count: int = CATEGORY_COUNT,
                            clues_per_category: int = CLUES_PER_CATEGORY,
                            max_attempts: int = MAX_ACQUISITION_ATTEMPTS,
                            candidate_count: int = CATALOG_CANDIDATE_COUNT) -> bool:
    """
    Validates board dimensions and acquisition limits.

    Returns:
        bool: True if every setting is usable

    Raises:
        ValueError: If any setting is out of range, with a detailed message
    """
    for name, value in (
        ("category_count", category_count),
        ("clues_per_category", clues_per_category),
        ("max_attempts", max_attempts),
        ("candidate_count", candidate_count),
    ):
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"{name} must be an integer, got {value!r}")
        if value < 1:
            raise ValueError(f"{name} must be at least 1, got {value}")

    if candidate_count < category_count:
        raise ValueError(
            f"candidate_count ({candidate_count}) cannot be smaller than "
            f"category_count ({category_count})"
        )

    return True


if __name__ == "__main__":

    try:
        validate_board_settings()
        print(" Board settings validation passed")
    except ValueError as config_error:
        print(f" Configuration validation failed: {config_error}")
        exit(1)
