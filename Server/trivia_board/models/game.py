"""
Game Data Models

Contains the session status values and the JSON-facing board snapshot.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional


class SessionStatus(Enum):
    """Lifecycle of a game session's board."""
    EMPTY = "empty"
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


@dataclass
class BoardState:
    """Client-facing board representation (never leaks unrevealed text)."""
    game_id: str
    generation: int
    status: str
    categories: List[Dict] = field(default_factory=list)
    error: Optional[str] = None
