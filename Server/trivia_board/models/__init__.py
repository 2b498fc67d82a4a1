"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .board import Board, Category, CategoryRef, Clue, RevealResult, RevealState, ValidationResult
from .game import BoardState, SessionStatus

__all__ = [
    'Board', 'Category', 'CategoryRef', 'Clue', 'RevealResult', 'RevealState',
    'ValidationResult', 'BoardState', 'SessionStatus'
]
