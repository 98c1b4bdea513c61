"""
Per-session storage of the game.

Each browser session owns exactly one GameState, kept in the Flask session
cookie. Nothing outlives the session.
"""

import logging
from uuid import uuid4

from flask import session

from tictactoe.game.state import GameState

logger = logging.getLogger(__name__)

GAME_KEY = "tic_tac_toe_game"
SESSION_ID_KEY = "tic_tac_toe_session"


def session_key():
    """Random id for this browser session, created on first use."""
    key = session.get(SESSION_ID_KEY)
    if not key:
        key = uuid4().hex
        session[SESSION_ID_KEY] = key
    return key


def load_game():
    data = session.get(GAME_KEY)
    if data is None:
        return GameState()
    try:
        return GameState.from_dict(data)
    except ValueError as e:
        logger.warning(f"Discarding corrupt game in session {session_key()[:8]}: {e}")
        return GameState()


def save_game(game):
    session[GAME_KEY] = game.to_dict()
