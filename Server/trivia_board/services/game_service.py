"""
Game Service

Owns the board of every game session and routes reveals into it.
"""

import logging
import threading
import uuid
from typing import Dict, Optional

from ..config import Config
from ..config.game_settings import ACQUISITION_FAILED_MESSAGE
from ..exceptions import AddressingError
from ..models.board import Board, RevealResult
from ..models.game import BoardState, SessionStatus
from ..utils.game_logger import game_logger
from .acquisition_service import acquire_board
from .catalog_client import CatalogClient
from .clue_state import cell_text, reveal


class GameService:
    """
    Session controller for trivia boards.

    This class handles:
    - Game session management with unique game IDs
    - Board acquisition with a per-session generation counter, so a stale
      acquisition can never replace a board from a newer restart
    - Clue reveals against the session's current board
    - Board snapshots that never expose unrevealed text
    """

    def __init__(self, catalog=None, settings=Config):
        self.settings = settings
        self.catalog = catalog or CatalogClient(settings.CATALOG_BASE_URL, settings.CATALOG_TIMEOUT_SECONDS)
        self.games: Dict[str, Dict] = {}
        self._lock = threading.Lock()

    def create_game(self) -> str:
        """
        Creates an empty game session.

        Returns:
            str: Unique game ID for this session
        """
        game_id = str(uuid.uuid4())
        with self._lock:
            self.games[game_id] = {
                "board": None,
                "generation": 0,
                "status": SessionStatus.EMPTY,
                "error": None,
            }
        return game_id

    def begin_acquisition(self, game_id: str) -> Optional[int]:
        """
        Starts a new acquisition for a session and tears down its board.

        Returns:
            int: Generation token the acquisition must present on completion,
            or None if the game is not found
        """
        with self._lock:
            game = self.games.get(game_id)
            if game is None:
                return None
            game["generation"] += 1
            game["board"] = None
            game["status"] = SessionStatus.LOADING
            game["error"] = None
            return game["generation"]

    def complete_acquisition(self, game_id: str, generation: int, board: Board) -> bool:
        """
        Installs an acquired board if its generation is still current.

        Returns:
            bool: False if the game is gone or a newer acquisition has started
        """
        with self._lock:
            game = self.games.get(game_id)
            if game is None or game["generation"] != generation:
                current = game["generation"] if game else None
                installed = False
            else:
                game["board"] = board
                game["status"] = SessionStatus.READY
                game["error"] = None
                installed = True

        if not installed:
            game_logger.log_game_event(
                game_id, 'stale_board_discarded',
                generation=generation, current_generation=current
            )
        return installed

    def fail_acquisition(self, game_id: str, generation: int, error: Exception) -> bool:
        """
        Records a failed acquisition if its generation is still current.

        The session is left without a board and can be restarted. Any
        exception is accepted; AcquisitionError adds its found/needed counts
        to the log entry.
        """
        with self._lock:
            game = self.games.get(game_id)
            if game is None or game["generation"] != generation:
                return False
            game["board"] = None
            game["status"] = SessionStatus.FAILED
            game["error"] = ACQUISITION_FAILED_MESSAGE

        game_logger.log_game_event(
            game_id, 'acquisition_failed', level=logging.WARNING,
            generation=generation,
            error_type=type(error).__name__,
            found=getattr(error, "found", None),
            needed=getattr(error, "needed", None)
        )
        return True

    def acquire(self, game_id: str) -> Board:
        """Runs board acquisition for a session using the configured settings."""
        return acquire_board(
            self.catalog,
            self.settings.CATEGORY_COUNT,
            self.settings.CLUES_PER_CATEGORY,
            max_attempts=self.settings.MAX_ACQUISITION_ATTEMPTS,
            candidate_count=self.settings.CATALOG_CANDIDATE_COUNT,
            max_workers=self.settings.FETCH_CONCURRENCY,
            retry_pause=self.settings.ACQUISITION_RETRY_PAUSE,
            game_id=game_id,
        )

    def new_board(self, game_id: str) -> Optional[BoardState]:
        """
        Acquires a fresh board for a session synchronously.

        Returns:
            BoardState after the acquisition, or None if the game is not found

        Raises:
            AcquisitionError: after the failure has been recorded on the session;
            any other exception is recorded the same way and re-raised
        """
        generation = self.begin_acquisition(game_id)
        if generation is None:
            return None

        try:
            board = self.acquire(game_id)
        except Exception as e:
            self.fail_acquisition(game_id, generation, e)
            raise

        self.complete_acquisition(game_id, generation, board)
        return self.get_board_state(game_id)

    def reveal(self, game_id: str, category_index, clue_index) -> Optional[RevealResult]:
        """
        Advances one clue of a session's board.

        Returns:
            RevealResult, or None if the game is not found

        Raises:
            AddressingError: board torn down or indices do not resolve
        """
        with self._lock:
            game = self.games.get(game_id)
            if game is None:
                return None
            try:
                result = reveal(game["board"], category_index, clue_index)
            except AddressingError as e:
                game_logger.log_game_event(
                    game_id, 'reveal_ignored', level=logging.WARNING,
                    category_index=category_index, clue_index=clue_index, reason=e.reason
                )
                raise

        if result.changed:
            game_logger.log_game_event(
                game_id, 'clue_revealed',
                category_index=category_index, clue_index=clue_index, state=result.state.value
            )
        return result

    def get_board(self, game_id: str) -> Optional[Board]:
        game = self.games.get(game_id)
        return game["board"] if game else None

    def get_board_state(self, game_id: str) -> Optional[BoardState]:
        """
        Returns the current board snapshot for a session.

        Args:
            game_id: Unique game identifier

        Returns:
            BoardState object or None if game not found
        """
        with self._lock:
            game = self.games.get(game_id)
            if game is None:
                return None

            categories = []
            board = game["board"]
            if board is not None:
                for category in board.categories:
                    categories.append({
                        "title": category.title,
                        "clues": [
                            {"state": clue.reveal_state.value, "text": cell_text(clue)}
                            for clue in category.clues
                        ],
                    })

            return BoardState(
                game_id=game_id,
                generation=game["generation"],
                status=game["status"].value,
                categories=categories,
                error=game["error"],
            )

    def active_game_count(self) -> int:
        return len(self.games)

    def close(self):
        """Releases the catalog connection pool."""
        close = getattr(self.catalog, "close", None)
        if close is not None:
            close()

    def delete_game(self, game_id: str) -> bool:
        """
        Removes a game session from memory.

        Returns:
            bool: True if game was deleted, False if not found
        """
        with self._lock:
            if game_id in self.games:
                del self.games[game_id]
                return True
            return False


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(catalog=None, settings=Config) -> GameService:
    """Initialize the global game service instance."""
    global _game_service
    _game_service = GameService(catalog, settings)
    return _game_service
