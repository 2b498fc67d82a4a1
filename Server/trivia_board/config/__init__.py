"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: Flask application configuration (environment-based)
- game_settings.py: Board shape and acquisition limits (business logic)
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config
from .game_settings import (
    CATEGORY_COUNT,
    CLUES_PER_CATEGORY,
    MAX_ACQUISITION_ATTEMPTS,
    CATALOG_CANDIDATE_COUNT,
    HIDDEN_CELL_TEXT,
    validate_board_settings,
)

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
    # Board settings
    'CATEGORY_COUNT', 'CLUES_PER_CATEGORY', 'MAX_ACQUISITION_ATTEMPTS',
    'CATALOG_CANDIDATE_COUNT', 'HIDDEN_CELL_TEXT', 'validate_board_settings'
]
