"""
Board Acquisition Service

Builds a complete board from the remote catalog. Bad or short categories are
skipped, candidates are retried in bounded outer attempts, and the result is
all-or-nothing.
"""

import logging
import random
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Dict, List, Optional, Set

from ..config.game_settings import (
    CATALOG_CANDIDATE_COUNT,
    CATEGORY_COUNT,
    CLUES_PER_CATEGORY,
    MAX_ACQUISITION_ATTEMPTS,
    validate_board_settings,
)
from ..exceptions import AcquisitionError, TransientFetchError
from ..models.board import Board, Category, CategoryRef, Clue
from ..utils.game_logger import game_logger
from .validation import validate_category_detail, validate_category_list


def sample_clues(pairs, clues_per_category: int, rng: random.Random):
    """Draw ``clues_per_category`` distinct clues, each starting HIDDEN."""
    return tuple(Clue(question=q, answer=a) for q, a in rng.sample(pairs, clues_per_category))


class BoardAcquisition:
    """
    One acquisition run against a catalog.

    The catalog must provide ``list_categories(count)`` and
    ``get_category_detail(category_id)``; both may raise TransientFetchError.
    """

    def __init__(self,
                 catalog,
                 category_count: int = CATEGORY_COUNT,
                 clues_per_category: int = CLUES_PER_CATEGORY,
                 max_attempts: int = MAX_ACQUISITION_ATTEMPTS,
                 candidate_count: int = CATALOG_CANDIDATE_COUNT,
                 max_workers: int = 4,
                 retry_pause: float = 0.25,
                 rng: Optional[random.Random] = None,
                 game_id: Optional[str] = None):
        validate_board_settings(category_count, clues_per_category, max_attempts, candidate_count)
        self.catalog = catalog
        self.category_count = category_count
        self.clues_per_category = clues_per_category
        self.max_attempts = max_attempts
        self.candidate_count = candidate_count
        self.max_workers = max(1, max_workers)
        self.retry_pause = retry_pause
        self.rng = rng or random.Random()
        self.game_id = game_id

        self.accepted: Dict[Any, Category] = {}  # insertion order == acceptance order
        self.rejected: Set[Any] = set()
        self.attempts = 0

    @property
    def complete(self) -> bool:
        return len(self.accepted) >= self.category_count

    def _skip(self, reason: str, category_id: Any = None, level: int = logging.INFO):
        game_logger.log_game_event(
            self.game_id, 'category_skipped', level=level,
            category_id=category_id, reason=reason, attempt=self.attempts
        )

    def _discover_candidates(self) -> List[CategoryRef]:
        try:
            payload = self.catalog.list_categories(self.candidate_count)
        except TransientFetchError as e:
            self._skip(f"category listing failed: {e}", level=logging.WARNING)
            return []
        except Exception as e:
            # Unexpected catalog faults are handled like transient ones
            self._skip(f"category listing raised {type(e).__name__}: {e}", level=logging.WARNING)
            return []

        result = validate_category_list(payload)
        if not result.valid:
            self._skip(f"category listing rejected: {result.reason}", level=logging.WARNING)
            return []

        candidates = list(result.value)
        self.rng.shuffle(candidates)

        fresh: List[CategoryRef] = []
        seen: Set[Any] = set()
        for ref in candidates:
            if ref.category_id in self.accepted or ref.category_id in self.rejected or ref.category_id in seen:
                continue
            seen.add(ref.category_id)
            fresh.append(ref)
        return fresh

    def _accept(self, ref: CategoryRef, payload: Any) -> bool:
        result = validate_category_detail(payload, self.clues_per_category)
        if not result.valid:
            self.rejected.add(ref.category_id)
            self._skip(result.reason, ref.category_id)
            return False

        title, pairs = result.value
        self.accepted[ref.category_id] = Category(
            category_id=ref.category_id,
            title=title if title is not None else ref.title,
            clues=sample_clues(pairs, self.clues_per_category, self.rng),
        )
        return True

    def _validate_candidates(self, executor: ThreadPoolExecutor, candidates: List[CategoryRef]):
        for start in range(0, len(candidates), self.max_workers):
            batch = candidates[start:start + self.max_workers]
            futures = [executor.submit(self.catalog.get_category_detail, ref.category_id) for ref in batch]

            # Consume in shuffled order so acceptance order does not depend on timing
            for ref, future in zip(batch, futures):
                if self.complete:
                    return
                try:
                    payload = future.result()
                except TransientFetchError as e:
                    self._skip(f"detail fetch failed: {e}", ref.category_id, logging.WARNING)
                    continue
                except Exception as e:
                    self._skip(f"detail fetch raised {type(e).__name__}: {e}", ref.category_id, logging.WARNING)
                    continue
                self._accept(ref, payload)

            if self.complete:
                return

    def run(self) -> Board:
        """
        Collect ``category_count`` valid categories or give up.

        Raises:
            AcquisitionError: budget exhausted; no partial board is returned
        """
        started = time.monotonic()
        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            while self.attempts < self.max_attempts and not self.complete:
                self.attempts += 1
                candidates = self._discover_candidates()
                if candidates:
                    self._validate_candidates(executor, candidates)

                if not self.complete and self.attempts < self.max_attempts and self.retry_pause > 0:
                    time.sleep(self.retry_pause)

        if not self.complete:
            found = len(self.accepted)
            self.accepted.clear()
            game_logger.log_game_event(
                self.game_id, 'acquisition_failed', level=logging.WARNING,
                found=found, needed=self.category_count, attempts=self.attempts
            )
            raise AcquisitionError(found=found, needed=self.category_count)

        board = Board(categories=tuple(self.accepted.values())[:self.category_count])
        game_logger.log_game_event(
            self.game_id, 'board_acquired',
            attempts=self.attempts,
            rejected=len(self.rejected),
            categories=[category.title for category in board.categories],
            elapsed_seconds=round(time.monotonic() - started, 3)
        )
        return board


def acquire_board(catalog,
                  category_count: int = CATEGORY_COUNT,
                  clues_per_category: int = CLUES_PER_CATEGORY,
                  **options) -> Board:
    """
    Acquire a validated board of ``category_count`` x ``clues_per_category``.

    Args:
        catalog: object with ``list_categories`` and ``get_category_detail``
        category_count: number of categories on the board
        clues_per_category: number of clues drawn for each category
        **options: max_attempts, candidate_count, max_workers, retry_pause, rng, game_id

    Returns:
        Board with every clue HIDDEN

    Raises:
        AcquisitionError: not enough valid categories within the attempt budget
    """
    return BoardAcquisition(catalog, category_count, clues_per_category, **options).run()
