"""
Unit tests for Tic-Tac-Toe API routes.
Uses Flask test client with an in-memory SQLite activity log.
"""
import os
import unittest
from unittest.mock import patch

from tictactoe import create_app, db
from tictactoe.game.store import GAME_KEY
from tictactoe.models import LogEntry


def _create_test_app(**overrides):
    config = {
        "TESTING": True,
        "WTF_CSRF_ENABLED": False,
        "SECRET_KEY": "test-secret",
        "SQLALCHEMY_DATABASE_URI": "sqlite://",
    }
    config.update(overrides)
    return create_app(config)


class RouteTestCase(unittest.TestCase):

    def setUp(self):
        self.app = _create_test_app()
        self.ctx = self.app.app_context()
        self.ctx.push()
        db.create_all()
        self.client = self.app.test_client()

    def tearDown(self):
        db.session.remove()
        db.drop_all()
        self.ctx.pop()

    def play(self, position):
        return self.client.post("/tic-tac-toe/api/play", json={"position": position})

    def jump(self, move):
        return self.client.post("/tic-tac-toe/api/jump", json={"move": move})


class TestPages(RouteTestCase):

    def test_root_redirects_to_game(self):
        r = self.client.get("/")
        self.assertEqual(r.status_code, 302)
        self.assertIn("/tic-tac-toe/", r.headers["Location"])

    def test_index_renders_and_logs_visit(self):
        r = self.client.get("/tic-tac-toe/")
        self.assertEqual(r.status_code, 200)
        self.assertIn(b"game-board", r.data)
        entries = LogEntry.query.filter_by(category="Visit").all()
        self.assertEqual(len(entries), 1)
        self.assertEqual(entries[0].project, "tic_tac_toe")
        self.assertIsNotNone(entries[0].session_key)

    def test_unknown_api_path_returns_json_404(self):
        r = self.client.get("/tic-tac-toe/api/nope")
        self.assertEqual(r.status_code, 404)
        self.assertIn("error", r.get_json())


class TestApiState(RouteTestCase):

    def test_new_session_starts_empty(self):
        r = self.client.get("/tic-tac-toe/api/state")
        self.assertEqual(r.status_code, 200)
        data = r.get_json()
        self.assertEqual(data["board"], [""] * 9)
        self.assertEqual(data["status"], "Next player: X")
        self.assertTrue(data["x_is_next"])
        self.assertEqual(data["moves"], [{"move": 0, "description": "Go to game start"}])

    def test_corrupt_session_is_replaced(self):
        with self.client.session_transaction() as sess:
            sess[GAME_KEY] = {"history": "garbage", "current_move": 7}
        r = self.client.get("/tic-tac-toe/api/state")
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.get_json()["current_move"], 0)

    def test_sessions_are_independent(self):
        self.play(4)
        other = self.app.test_client()
        data = other.get("/tic-tac-toe/api/state").get_json()
        self.assertEqual(data["board"], [""] * 9)


class TestApiPlay(RouteTestCase):

    def test_move_is_kept_in_session(self):
        r = self.play(4)
        self.assertEqual(r.status_code, 200)
        data = r.get_json()
        self.assertTrue(data["accepted"])
        self.assertEqual(data["board"][4], "X")
        self.assertEqual(data["status"], "Next player: O")

        data = self.client.get("/tic-tac-toe/api/state").get_json()
        self.assertEqual(data["board"][4], "X")
        self.assertEqual(data["current_move"], 1)

    def test_occupied_cell_is_rejected_without_change(self):
        self.play(4)
        data = self.play(4).get_json()
        self.assertFalse(data["accepted"])
        self.assertEqual(data["reason"], "occupied")
        self.assertEqual(data["current_move"], 1)
        self.assertEqual(len(data["moves"]), 2)

    def test_win_then_further_moves_rejected(self):
        for position in (0, 1, 3, 4):
            self.play(position)
        data = self.play(6).get_json()
        self.assertEqual(data["winner"], "X")
        self.assertEqual(data["status"], "Winner: X")

        data = self.play(7).get_json()
        self.assertFalse(data["accepted"])
        self.assertEqual(data["reason"], "game_over")
        self.assertEqual(data["board"][7], "")

    def test_out_of_range_position(self):
        data = self.play(9).get_json()
        self.assertFalse(data["accepted"])
        self.assertEqual(data["reason"], "out_of_range")

    def test_bad_position_returns_400(self):
        for body in ({}, {"position": "4"}, {"position": True}, {"position": None}):
            with self.subTest(body=body):
                r = self.client.post("/tic-tac-toe/api/play", json=body)
                self.assertEqual(r.status_code, 400)
                self.assertIn("error", r.get_json())

    def test_non_json_body_returns_400(self):
        r = self.client.post("/tic-tac-toe/api/play", data="position=4")
        self.assertEqual(r.status_code, 400)

    def test_moves_are_logged(self):
        self.play(0)
        self.play(0)
        entries = LogEntry.query.filter_by(category="Move").all()
        self.assertEqual(len(entries), 1)
        self.assertIn("X played cell 0", entries[0].description)

    def test_winning_move_log_mentions_winner(self):
        for position in (0, 1, 3, 4, 6):
            self.play(position)
        last = LogEntry.query.filter_by(category="Move").order_by(LogEntry.id.desc()).first()
        self.assertIn("X wins", last.description)


class TestApiJump(RouteTestCase):

    def test_jump_and_branch(self):
        for position in (0, 1, 2, 3):
            self.play(position)

        r = self.jump(2)
        self.assertEqual(r.status_code, 200)
        data = r.get_json()
        self.assertEqual(data["current_move"], 2)
        self.assertEqual(len(data["moves"]), 5)
        self.assertEqual(data["board"][3], "")

        data = self.play(8).get_json()
        self.assertTrue(data["accepted"])
        self.assertEqual(data["current_move"], 3)
        self.assertEqual(len(data["moves"]), 4)
        self.assertEqual(data["board"][8], "X")
        self.assertEqual(data["board"][3], "")

    def test_out_of_range_jump_returns_400(self):
        self.play(0)
        r = self.jump(5)
        self.assertEqual(r.status_code, 400)
        self.assertIn("between 0 and 1", r.get_json()["error"])
        data = self.client.get("/tic-tac-toe/api/state").get_json()
        self.assertEqual(data["current_move"], 1)

    def test_bad_move_returns_400(self):
        r = self.client.post("/tic-tac-toe/api/jump", json={"move": "two"})
        self.assertEqual(r.status_code, 400)

    def test_jump_is_logged(self):
        self.play(0)
        self.jump(0)
        self.assertEqual(LogEntry.query.filter_by(category="Jump").count(), 1)


class TestMoveLoggingDisabled(RouteTestCase):

    def setUp(self):
        self.app = _create_test_app(TIC_TAC_TOE_LOG_MOVES=False)
        self.ctx = self.app.app_context()
        self.ctx.push()
        db.create_all()
        self.client = self.app.test_client()

    def test_moves_not_logged(self):
        self.play(0)
        self.jump(0)
        self.assertEqual(LogEntry.query.count(), 0)


class TestCreateApp(unittest.TestCase):

    def test_missing_secret_key_raises(self):
        with patch.dict(os.environ, {}, clear=True):
            with self.assertRaises(ValueError):
                create_app()


if __name__ == "__main__":
    unittest.main()
