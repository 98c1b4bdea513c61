import logging

from flask import Blueprint, current_app, jsonify, render_template, request

from tictactoe.game.store import load_game, save_game, session_key
from tictactoe.utils.logging import log_activity, log_project_visit

logger = logging.getLogger(__name__)

PROJECT = 'tic_tac_toe'

tic_tac_toe_bp = Blueprint('tic_tac_toe', __name__,
                           template_folder='templates')


def _int_field(name):
    """Read an integer field from the JSON body, or None if missing/invalid."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return None
    value = data.get(name)
    if not isinstance(value, int) or isinstance(value, bool):
        return None
    return value


def _log_game_activity(category, description):
    if current_app.config.get('TIC_TAC_TOE_LOG_MOVES', True):
        log_activity(PROJECT, category, description, session_key())


@tic_tac_toe_bp.route('/')
def index():
    """Display the Tic-Tac-Toe game - self-contained HTML with inline CSS/JS"""
    log_project_visit(PROJECT, 'Tic-Tac-Toe', session_key())
    return render_template('tic_tac_toe.html')


@tic_tac_toe_bp.route('/api/state', methods=['GET'])
def get_state():
    """Current board, status and move list for this session"""
    return jsonify(load_game().view())


@tic_tac_toe_bp.route('/api/play', methods=['POST'])
def play():
    """Place the next mark. Illegal moves are reported but change nothing."""
    position = _int_field('position')
    if position is None:
        return jsonify({'error': 'position must be an integer from 0 to 8'}), 400

    game = load_game()
    mark = game.next_mark
    result = game.play(position)
    if result.accepted:
        save_game(game)
        description = f"{mark.label} played cell {position} (move #{game.current_move})"
        if result.winner is not None:
            description += f"; {result.winner.label} wins"
        _log_game_activity('Move', description)
    else:
        logger.info(f"Rejected move at {position}: {result.reason}")

    response = game.view()
    response['accepted'] = result.accepted
    response['reason'] = result.reason
    return jsonify(response)


@tic_tac_toe_bp.route('/api/jump', methods=['POST'])
def jump():
    """Time travel to an earlier (or later) move without changing history"""
    move = _int_field('move')
    if move is None:
        return jsonify({'error': 'move must be an integer'}), 400

    game = load_game()
    if not game.jump_to(move):
        return jsonify({'error': f'move must be between 0 and {len(game.history) - 1}'}), 400

    save_game(game)
    _log_game_activity('Jump', f"Jumped to move #{move}")
    return jsonify(game.view())
