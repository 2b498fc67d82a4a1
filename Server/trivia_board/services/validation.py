"""
Catalog Response Validation

Explicit shape checks for catalog responses. Each check returns a tagged
ValidationResult instead of letting a missing field blow up later.
"""

from typing import Any, List, Tuple

from ..models.board import CategoryRef, ValidationResult


def _is_identifier(value: Any) -> bool:
    if isinstance(value, bool) or value is None:
        return False
    return isinstance(value, (int, str)) and value != ''


def validate_category_ref(entry: Any) -> ValidationResult:
    """Validate one ``{id, title}`` entry of a category listing."""
    if not isinstance(entry, dict):
        return ValidationResult.invalid(f"entry is {type(entry).__name__}, not an object")

    category_id = entry.get('id')
    if not _is_identifier(category_id):
        return ValidationResult.invalid(f"entry has unusable id {category_id!r}")

    title = entry.get('title')
    if not isinstance(title, str):
        return ValidationResult.invalid(f"category {category_id!r} has no title")

    return ValidationResult.ok(CategoryRef(category_id=category_id, title=title))


def validate_category_list(payload: Any) -> ValidationResult:
    """
    Validate a ``listCategories`` response.

    Malformed entries are dropped; the result is invalid only when the
    payload is not a list or no entry survives.

    Returns:
        ValidationResult whose value is a list of CategoryRef
    """
    if not isinstance(payload, list):
        return ValidationResult.invalid(f"category listing is {type(payload).__name__}, not a list")

    if not payload:
        return ValidationResult.invalid("category listing is empty")

    refs: List[CategoryRef] = []
    for entry in payload:
        result = validate_category_ref(entry)
        if result.valid:
            refs.append(result.value)

    if not refs:
        return ValidationResult.invalid("category listing has no usable entries")

    return ValidationResult.ok(refs)


def validate_clue_entry(entry: Any) -> bool:
    """A clue entry is usable when it carries string question and answer fields."""
    return (
        isinstance(entry, dict)
        and isinstance(entry.get('question'), str)
        and isinstance(entry.get('answer'), str)
    )


def validate_category_detail(payload: Any, clues_per_category: int) -> ValidationResult:
    """
    Validate a ``getCategoryDetail`` response.

    The clue list must be present, be a list of question/answer objects,
    and hold at least ``clues_per_category`` entries.

    Returns:
        ValidationResult whose value is ``(title, [(question, answer), ...])``;
        the title is None when the response omits it
    """
    if not isinstance(payload, dict):
        return ValidationResult.invalid(f"detail is {type(payload).__name__}, not an object")

    if 'clues' not in payload:
        return ValidationResult.invalid("detail has no clue list")

    clues = payload['clues']
    if not isinstance(clues, list):
        return ValidationResult.invalid(f"clue list is {type(clues).__name__}, not a list")

    for index, entry in enumerate(clues):
        if not validate_clue_entry(entry):
            return ValidationResult.invalid(f"clue {index} is not a question/answer pair")

    if len(clues) < clues_per_category:
        return ValidationResult.invalid(
            f"only {len(clues)} clues, need {clues_per_category}"
        )

    title = payload.get('title')
    pairs: List[Tuple[str, str]] = [(entry['question'], entry['answer']) for entry in clues]
    return ValidationResult.ok((title if isinstance(title, str) else None, pairs))
