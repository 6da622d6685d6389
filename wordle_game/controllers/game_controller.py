"""
Game Controller

Handles all game-related HTTP endpoints.
"""

from dataclasses import asdict

from flask import Blueprint, request, jsonify

from ..config.game_settings import get_word_statistics
from ..models.errors import InvalidSolutionError, WordleError
from ..services.game_service import get_game_service
from ..utils.game_logger import get_game_logger

game_bp = Blueprint('game', __name__)


def _service_unavailable():
    return jsonify({
        'success': False,
        'error': 'Game service unavailable'
    }), 500


def _error_response(action, message, status_code, game_id=None, error_code=None, **kwargs):
    error_response = {
        'success': False,
        'error': message
    }
    if error_code:
        error_response['error_code'] = error_code
    get_game_logger().log_server_response(request, action, False, error_response, game_id, **kwargs)
    return jsonify(error_response), status_code


@game_bp.route('/new_game', methods=['POST'])
def new_game():
    """Create a new game session, optionally with an explicit solution."""
    game_logger = get_game_logger()
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        data = request.get_json(silent=True)
        if data is None:
            data = {}
        if not isinstance(data, dict):
            return _error_response('new_game', 'Request body must be a JSON object', 400)
        solution = data.get('solution')

        game_logger.log_user_action(request, 'new_game', explicit_solution=solution is not None)

        try:
            game_id = game_service.create_new_game(solution)
        except InvalidSolutionError as e:
            return _error_response('new_game', str(e), 400, error_code=e.code)

        state = game_service.get_game_state(game_id)
        response_data = {
            'success': True,
            'game_id': game_id,
            'state': asdict(state)
        }

        game_logger.log_server_response(
            request, 'new_game', True, response_data, game_id,
            max_rounds=state.max_rounds
        )
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'new_game')
        return _error_response('new_game', str(e), 500)


@game_bp.route('/game/<game_id>/state', methods=['GET'])
def get_state(game_id):
    """Get current game state."""
    game_logger = get_game_logger()
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        game_logger.log_user_action(request, 'get_state', game_id)

        state = game_service.get_game_state(game_id)
        if state is None:
            return _error_response('get_state', 'Game not found', 404, game_id)

        response_data = {
            'success': True,
            'state': asdict(state)
        }
        game_logger.log_server_response(
            request, 'get_state', True, response_data, game_id,
            current_turn=state.current_turn, game_over=state.game_over
        )
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'get_state', game_id)
        return _error_response('get_state', str(e), 500, game_id)


@game_bp.route('/game/<game_id>/guess', methods=['POST'])
def make_guess(game_id):
    """Submit a guess for validation and evaluation."""
    game_logger = get_game_logger()
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        data = request.get_json(silent=True)
        if not isinstance(data, dict) or not isinstance(data.get('guess'), str):
            return _error_response('submit_guess', 'Guess is required', 400, game_id)

        guess = data['guess']
        game_logger.log_user_action(
            request, 'submit_guess', game_id,
            guess=guess, guess_length=len(guess)
        )

        try:
            result = game_service.make_guess(game_id, guess)
        except WordleError as e:
            return _error_response(
                'submit_guess', str(e), 400, game_id,
                error_code=e.code, attempted_guess=guess
            )

        if result is None:
            return _error_response('submit_guess', 'Game not found', 404, game_id)

        state = game_service.get_game_state(game_id)
        response_data = {
            'success': True,
            'result': {
                'turn': result.turn_number,
                'status': result.status.label,
                'letters': result.guess.to_pairs()
            },
            'state': asdict(state)
        }
        game_logger.log_server_response(
            request, 'submit_guess', True, response_data, game_id,
            guess=guess, turn=result.turn_number, game_over=state.game_over
        )
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'submit_guess', game_id)
        return _error_response('submit_guess', str(e), 500, game_id)


@game_bp.route('/game/<game_id>', methods=['DELETE'])
def delete_game(game_id):
    """Delete a game session."""
    game_logger = get_game_logger()
    try:
        game_service = get_game_service()
        if not game_service:
            return _service_unavailable()

        game_logger.log_user_action(request, 'delete_game', game_id)

        success = game_service.delete_game(game_id)
        response_data = {
            'success': success
        }
        game_logger.log_server_response(request, 'delete_game', success, response_data, game_id)

        if success:
            game_logger.log_game_event(game_id, 'game_deleted', request.remote_addr)

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'delete_game', game_id)
        return _error_response('delete_game', str(e), 500, game_id)


def _word_stats(game_service):
    """Summary of the loaded dictionary; the full letter table stays out of the response."""
    if not game_service:
        return None
    stats = get_word_statistics(game_service.dictionary)
    stats.pop('letter_frequency', None)
    return stats


@game_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    game_logger = get_game_logger()
    game_service = get_game_service()

    game_logger.log_user_action(request, 'health_check')

    response_data = {
        'status': 'healthy',
        'active_games': game_service.active_games if game_service else 0,
        'total_games': len(game_service.games) if game_service else 0,
        'word_stats': _word_stats(game_service),
        'log_stats': game_logger.get_log_stats()
    }
    game_logger.log_server_response(request, 'health_check', True, response_data)
    return jsonify(response_data)
