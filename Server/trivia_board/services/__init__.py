"""
Services Package

Contains all business logic and service classes.
"""

from .acquisition_service import BoardAcquisition, acquire_board
from .catalog_client import CatalogClient
from .clue_state import cell_text, resolve_clue, reveal
from .game_service import GameService, get_game_service, initialize_game_service

__all__ = [
    'BoardAcquisition', 'acquire_board',
    'CatalogClient',
    'cell_text', 'resolve_clue', 'reveal',
    'GameService', 'get_game_service', 'initialize_game_service'
]
