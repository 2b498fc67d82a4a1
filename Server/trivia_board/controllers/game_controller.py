"""
Game Controller

Handles all board-related HTTP endpoints.
"""

from flask import Blueprint, request, jsonify
from dataclasses import asdict
from ..exceptions import AcquisitionError, AddressingError
from ..config.game_settings import ACQUISITION_FAILED_MESSAGE
from ..services.game_service import get_game_service
from ..utils.decorators import require_game_service
from ..utils.game_logger import game_logger
from ..utils.helpers import parse_clue_address

game_bp = Blueprint('game', __name__)


def _acquisition_failed_response(action, game_service, game_id, error):
    error_response = {
        'success': False,
        'error': ACQUISITION_FAILED_MESSAGE,
        'game_id': game_id,
        'state': asdict(game_service.get_board_state(game_id))
    }
    game_logger.log_server_response(
        request, action, False, error_response, game_id,
        found=error.found, needed=error.needed
    )
    return jsonify(error_response), 503


@game_bp.route('/new_game', methods=['POST'])
@require_game_service
def new_game(game_service):
    """Create a new game session and load its board."""
    game_id = None
    try:
        game_logger.log_user_action(request, 'new_game')

        game_id = game_service.create_game()
        state = game_service.new_board(game_id)

        response_data = {
            'success': True,
            'game_id': game_id,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'new_game', True, response_data, game_id,
            generation=state.generation
        )

        return jsonify(response_data)

    except AcquisitionError as e:
        return _acquisition_failed_response('new_game', game_service, game_id, e)

    except Exception as e:
        game_logger.log_error(request, e, 'new_game', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'new_game', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/state', methods=['GET'])
@require_game_service
def get_state(game_id, game_service):
    """Get current board state."""
    try:
        game_logger.log_user_action(request, 'get_state', game_id)

        state = game_service.get_board_state(game_id)
        if state is None:
            error_response = {
                'success': False,
                'error': 'Game not found'
            }
            game_logger.log_server_response(request, 'get_state', False, error_response, game_id)
            return jsonify(error_response), 404

        response_data = {
            'success': True,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'get_state', True, response_data, game_id,
            status=state.status
        )

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'get_state', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'get_state', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/restart', methods=['POST'])
@require_game_service
def restart_game(game_id, game_service):
    """Discard the current board and load a fresh one."""
    try:
        game_logger.log_user_action(request, 'restart_game', game_id)

        state = game_service.new_board(game_id)
        if state is None:
            error_response = {
                'success': False,
                'error': 'Game not found'
            }
            game_logger.log_server_response(request, 'restart_game', False, error_response, game_id)
            return jsonify(error_response), 404

        response_data = {
            'success': True,
            'game_id': game_id,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'restart_game', True, response_data, game_id,
            generation=state.generation
        )

        return jsonify(response_data)

    except AcquisitionError as e:
        return _acquisition_failed_response('restart_game', game_service, game_id, e)

    except Exception as e:
        game_logger.log_error(request, e, 'restart_game', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'restart_game', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/reveal', methods=['POST'])
@require_game_service
def reveal_clue(game_id, game_service):
    """Advance one clue cell: hidden -> question -> answer."""
    try:
        category_index, clue_index, error = parse_clue_address(request.get_json(silent=True))
        if error:
            error_response = {
                'success': False,
                'error': error
            }
            game_logger.log_server_response(request, 'reveal_clue', False, error_response, game_id)
            return jsonify(error_response), 400

        game_logger.log_user_action(
            request, 'reveal_clue', game_id,
            category=category_index, clue=clue_index
        )

        try:
            result = game_service.reveal(game_id, category_index, clue_index)
        except AddressingError as e:
            # Stale or out-of-range clicks are a no-op for the view
            response_data = {
                'success': False,
                'ignored': True,
                'reason': e.reason
            }
            game_logger.log_server_response(request, 'reveal_clue', False, response_data, game_id)
            return jsonify(response_data)

        if result is None:
            error_response = {
                'success': False,
                'error': 'Game not found'
            }
            game_logger.log_server_response(request, 'reveal_clue', False, error_response, game_id)
            return jsonify(error_response), 404

        response_data = {
            'success': True,
            'category': result.category_index,
            'clue': result.clue_index,
            'state': result.state.value,
            'text': result.text,
            'changed': result.changed
        }

        game_logger.log_server_response(request, 'reveal_clue', True, response_data, game_id)

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'reveal_clue', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'reveal_clue', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>', methods=['DELETE'])
@require_game_service
def delete_game(game_id, game_service):
    """Delete a game session."""
    try:
        game_logger.log_user_action(request, 'delete_game', game_id)

        success = game_service.delete_game(game_id)

        response_data = {
            'success': success
        }

        game_logger.log_server_response(request, 'delete_game', success, response_data, game_id)

        if success:
            game_logger.log_game_event(game_id, 'game_deleted', request.remote_addr)

        return jsonify(response_data), 200 if success else 404

    except Exception as e:
        game_logger.log_error(request, e, 'delete_game', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'delete_game', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    try:
        game_service = get_game_service()

        game_logger.log_user_action(request, 'health_check')

        log_stats = game_logger.get_log_stats()

        response_data = {
            'status': 'healthy',
            'active_games': game_service.active_game_count() if game_service else 0,
            'log_stats': log_stats,
            'game_service_available': game_service is not None
        }

        game_logger.log_server_response(request, 'health_check', True, response_data)

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'health_check')
        error_response = {
            'status': 'error',
            'error': str(e)
        }
        game_logger.log_server_response(request, 'health_check', False, error_response)
        return jsonify(error_response), 500
