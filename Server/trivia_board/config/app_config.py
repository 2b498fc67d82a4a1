"""
Configuration Management Module

Centralized configuration management following the 12-factor app methodology.
All configuration is loaded from environment variables with sensible defaults.
"""

import os
from dotenv import load_dotenv

from . import game_settings

# Load environment variables from config.env
load_dotenv(os.path.join(os.path.dirname(os.path.abspath(__file__)), 'config.env'))


class Config:
    """Base configuration class with all settings."""

    # Flask Settings
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-in-production')
    DEBUG = os.getenv('DEBUG', 'False').lower() == 'true'

    # Server Settings
    HOST = os.getenv('HOST', '127.0.0.1')
    PORT = int(os.getenv('PORT', 5000))

    # Remote Catalog Settings
    CATALOG_BASE_URL = os.getenv('CATALOG_BASE_URL', game_settings.CATALOG_BASE_URL)
    CATALOG_TIMEOUT_SECONDS = float(os.getenv('CATALOG_TIMEOUT_SECONDS', 10))

    # Board Settings
    CATEGORY_COUNT = int(os.getenv('CATEGORY_COUNT', game_settings.CATEGORY_COUNT))
    CLUES_PER_CATEGORY = int(os.getenv('CLUES_PER_CATEGORY', game_settings.CLUES_PER_CATEGORY))

    # Acquisition Settings
    MAX_ACQUISITION_ATTEMPTS = int(os.getenv('MAX_ACQUISITION_ATTEMPTS', game_settings.MAX_ACQUISITION_ATTEMPTS))
    CATALOG_CANDIDATE_COUNT = int(os.getenv('CATALOG_CANDIDATE_COUNT', game_settings.CATALOG_CANDIDATE_COUNT))
    FETCH_CONCURRENCY = int(os.getenv('FETCH_CONCURRENCY', 4))
    ACQUISITION_RETRY_PAUSE = float(os.getenv('ACQUISITION_RETRY_PAUSE', 0.25))

    # Logging Settings
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_DIR = os.getenv('LOG_DIR', 'logs')


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    DEBUG = True
    ACQUISITION_RETRY_PAUSE = 0.0


# Configuration mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
