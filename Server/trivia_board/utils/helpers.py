"""
Helper Functions

Contains utility functions used throughout the application.
"""

from typing import Any, Dict, Optional, Tuple


def get_user_identity(request_obj=None) -> Dict[str, str]:
    """Extract user identity information from request."""
    if request_obj is None:
        from flask import request
        request_obj = request

    user_ip = getattr(request_obj, 'remote_addr', None) or 'unknown'

    return {
        'user_ip': user_ip,
        'session_id': None,
        'username': None
    }


def parse_clue_address(data: Optional[Dict[str, Any]]) -> Tuple[Optional[Any], Optional[Any], Optional[str]]:
    """
    Pull the (category, clue) address out of a request body.

    Returns:
        Tuple of (category_index, clue_index, error_message); the indices are
        passed through untouched so the state machine decides whether they resolve.
    """
    if not isinstance(data, dict):
        return None, None, 'Request body must be a JSON object'

    if 'category' not in data or 'clue' not in data:
        return None, None, 'Both "category" and "clue" are required'

    return data['category'], data['clue'], None
