"""Flask CLI commands for Tic-Tac-Toe"""

import click
import logging

from tictactoe import db
from tictactoe.game.state import GameState

logger = logging.getLogger(__name__)


def replay_moves(positions, jump=None):
    """
    Play `positions` in order on a fresh game.

    If `jump` is given, the game jumps back to that move before the last
    position is played, so the last move starts a new branch.

    Returns:
        (game, log) where log holds one (position, MoveResult) per play.
    """
    game = GameState()
    log = []
    for i, position in enumerate(positions):
        if jump is not None and i == len(positions) - 1:
            if not game.jump_to(jump):
                raise click.BadParameter(
                    f"can only jump to moves 0-{len(game.history) - 1}", param_hint="--jump"
                )
        log.append((position, game.play(position)))
    return game, log


def init_app(app):
    """Register CLI commands with the Flask app"""

    @app.cli.command("init-db")
    def init_db():
        """Create the activity log tables."""
        with app.app_context():
            db.create_all()
        click.echo("Database tables created.")

    @app.cli.group("tic-tac-toe")
    def tic_tac_toe():
        """Tic-Tac-Toe utilities."""

    @tic_tac_toe.command("replay")
    @click.argument("positions", nargs=-1, required=True, type=click.IntRange(0, 8))
    @click.option("--jump", type=int, default=None,
                  help="Jump back to this move before playing the last position.")
    def replay(positions, jump):
        """
        Replay a game from cell positions (0-8) and print each board.

        Example: flask tic-tac-toe replay 0 1 3 4 6
        """
        game, log = replay_moves(list(positions), jump=jump)

        click.echo("Index map:\n0|1|2\n3|4|5\n6|7|8\n")
        for position, result in log:
            if not result.accepted:
                click.echo(f"Cell {position} rejected ({result.reason})", err=True)
        for move, board in enumerate(game.history):
            label = "Game start" if move == 0 else f"Move #{move}"
            click.echo(f"{label}:\n{board.to_text()}\n")
        if game.current_move != len(game.history) - 1:
            click.echo(f"Viewing move #{game.current_move}")
        click.echo(game.status)
