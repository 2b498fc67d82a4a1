"""
WebSocket Event Handlers

Pushes board loading progress and clue reveals to the browser view.
"""

from dataclasses import asdict
from flask import request
from flask_socketio import emit, join_room, leave_room
from ..config.game_settings import ACQUISITION_FAILED_MESSAGE
from ..exceptions import AcquisitionError, AddressingError
from ..utils.decorators import websocket_game_required
from ..utils.game_logger import game_logger


def _room(game_id):
    return f"game_{game_id}"


def _publish_failure(socketio, game_service, game_id, generation, error):
    if game_service.fail_acquisition(game_id, generation, error):
        socketio.emit('board_failed', {
            'game_id': game_id,
            'generation': generation,
            'error': ACQUISITION_FAILED_MESSAGE
        }, room=_room(game_id))


def acquire_and_publish(socketio, game_service, game_id, generation):
    """
    Background task: acquire a board and announce the outcome to the game room.

    Results from a superseded generation are dropped silently.
    """
    try:
        board = game_service.acquire(game_id)
    except AcquisitionError as e:
        _publish_failure(socketio, game_service, game_id, generation, e)
        return
    except Exception as e:
        game_logger.logger.error(f"Background acquisition for game {game_id} crashed: {e}")
        _publish_failure(socketio, game_service, game_id, generation, e)
        return

    if game_service.complete_acquisition(game_id, generation, board):
        state = game_service.get_board_state(game_id)
        socketio.emit('board_ready', {'game_id': game_id, 'state': asdict(state)}, room=_room(game_id))


def register_websocket_handlers(socketio):
    """Register all WebSocket event handlers."""

    @socketio.on('connect')
    def handle_connect():
        """Handle WebSocket connection."""
        pass

    @socketio.on('join_game')
    @websocket_game_required
    def handle_join_game(data, game_service):
        """Subscribe this socket to a game's room and send the current board."""
        game_id = data['game_id']
        join_room(_room(game_id))
        state = game_service.get_board_state(game_id)
        emit('board_state', {'game_id': game_id, 'state': asdict(state)})

    @socketio.on('leave_game')
    def handle_leave_game(data):
        if isinstance(data, dict) and 'game_id' in data:
            leave_room(_room(data["game_id"]))

    @socketio.on('restart_game')
    @websocket_game_required
    def handle_restart_game(data, game_service):
        """Tear the board down and acquire a new one in the background."""
        game_id = data['game_id']
        generation = game_service.begin_acquisition(game_id)
        if generation is None:
            emit('error', {'error': 'Game not found', 'game_id': game_id})
            return

        join_room(_room(game_id))
        game_logger.log_game_event(game_id, 'restart_requested', request.remote_addr, generation=generation)
        emit('board_loading', {'game_id': game_id, 'generation': generation}, room=_room(game_id))
        socketio.start_background_task(acquire_and_publish, socketio, game_service, game_id, generation)

    @socketio.on('reveal_clue')
    @websocket_game_required
    def handle_reveal_clue(data, game_service):
        """Advance one clue and broadcast the cell's new text."""
        game_id = data['game_id']
        try:
            result = game_service.reveal(game_id, data.get('category'), data.get('clue'))
        except AddressingError:
            # Already logged by the game service; the click is a no-op
            return

        if result is None:
            return

        emit('clue_revealed', {
            'game_id': game_id,
            'category': result.category_index,
            'clue': result.clue_index,
            'state': result.state.value,
            'text': result.text,
            'changed': result.changed
        }, room=_room(game_id))
