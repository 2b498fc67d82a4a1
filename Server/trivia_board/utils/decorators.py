"""
Service Decorators

Contains decorators shared by the HTTP controllers and WebSocket handlers.
"""

from functools import wraps
from flask import jsonify
from flask_socketio import emit


def require_game_service(f):
    """
    Decorator that resolves the game service for an HTTP endpoint.

    The service is passed to the endpoint as the ``game_service`` keyword.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        from ..services.game_service import get_game_service

        game_service = get_game_service()
        if not game_service:
            return jsonify({
                'success': False,
                'error': 'Game service unavailable'
            }), 500

        kwargs['game_service'] = game_service
        return f(*args, **kwargs)

    return decorated_function


def websocket_game_required(f):
    """Decorator for WebSocket events that address an existing game."""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        from ..services.game_service import get_game_service

        game_service = get_game_service()
        if not game_service:
            emit('error', {'error': 'Game service unavailable'})
            return

        if not args or not isinstance(args[0], dict) or 'game_id' not in args[0]:
            emit('error', {'error': 'game_id is required'})
            return

        game_id = args[0]['game_id']
        if game_service.get_board_state(game_id) is None:
            emit('error', {'error': 'Game not found', 'game_id': game_id})
            return

        kwargs['game_service'] = game_service
        return f(*args, **kwargs)

    return decorated_function
