"""
Logging utilities for tracking player activity in the game.
"""

import logging

from tictactoe.models import LogEntry
from tictactoe import db

logger = logging.getLogger(__name__)


def log_activity(project_name, category, description, session_key=None):
    """
    Write one row to the activity log.

    A failed write is rolled back and logged; it never breaks the request
    that triggered it.

    Args:
        project_name (str): The project identifier (e.g., 'tic_tac_toe')
        category (str): Kind of activity ('Visit', 'Move', 'Jump')
        description (str): Human-readable summary
        session_key (str, optional): Id of the browser session that acted
    """
    log_entry = LogEntry(
        project=project_name,
        category=category,
        session_key=session_key,
        description=description
    )
    try:
        db.session.add(log_entry)
        db.session.commit()
    except Exception:
        db.session.rollback()
        logger.error(f"Could not write {category} log entry for {project_name}", exc_info=True)


def log_project_visit(project_name, project_display_name=None, session_key=None):
    """
    Log a visit to a project/page.
    
    Args:
        project_name (str): The project identifier (e.g., 'tic_tac_toe')
        project_display_name (str, optional): Human-readable name for the description.
                                              Defaults to project_name if not provided.
        session_key (str, optional): Id of the visiting browser session
    """
    display_name = project_display_name or project_name
    user_desc = f"Session {session_key[:8]}" if session_key else "Anonymous session"
    log_activity(project_name, 'Visit', f"{user_desc} visited {display_name}", session_key)
