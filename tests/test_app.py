import json
import unittest

import fakes  # noqa: F401
from fakes import build_catalog
from trivia_board import create_app
from trivia_board.config import TestingConfig
from trivia_board.services import game_service as game_service_mod


class FourByThreeConfig(TestingConfig):
    CATEGORY_COUNT = 4
    CLUES_PER_CATEGORY = 3
    MAX_ACQUISITION_ATTEMPTS = 5


class TestFlaskAPI(unittest.TestCase):
    def setUp(self):
        self._orig_service = game_service_mod._game_service
        self.catalog = build_catalog([6] * 10)
        self.service = game_service_mod.initialize_game_service(self.catalog, FourByThreeConfig)
        self.app, self.socketio = create_app(FourByThreeConfig)
        self.client = self.app.test_client()

    def tearDown(self):
        game_service_mod._game_service = self._orig_service

    def _new_game(self):
        r = self.client.post("/api/new_game")
        self.assertEqual(r.status_code, 200)
        return r.get_json()

    def _reveal(self, game_id, payload):
        return self.client.post(
            f"/api/game/{game_id}/reveal", data=json.dumps(payload), content_type="application/json"
        )

    def test_given_new_game_when_posted_then_board_of_hidden_cells(self):
        data = self._new_game()
        self.assertTrue(data["success"])
        state = data["state"]
        self.assertEqual(state["status"], "ready")
        self.assertEqual(len(state["categories"]), 4)
        for category in state["categories"]:
            self.assertEqual(len(category["clues"]), 3)
            self.assertTrue(all(c == {"state": "HIDDEN", "text": "?"} for c in category["clues"]))

    def test_given_cell_when_revealed_three_times_then_question_answer_noop(self):
        game_id = self._new_game()["game_id"]
        clue = self.service.get_board(game_id).categories[2].clues[1]

        d1 = self._reveal(game_id, {"category": 2, "clue": 1}).get_json()
        self.assertEqual((d1["state"], d1["text"], d1["changed"]), ("QUESTION", clue.question, True))

        d2 = self._reveal(game_id, {"category": 2, "clue": 1}).get_json()
        self.assertEqual((d2["state"], d2["text"], d2["changed"]), ("ANSWER", clue.answer, True))

        d3 = self._reveal(game_id, {"category": 2, "clue": 1}).get_json()
        self.assertTrue(d3["success"])
        self.assertEqual((d3["state"], d3["text"], d3["changed"]), ("ANSWER", clue.answer, False))

    def test_given_out_of_range_cell_when_revealed_then_ignored_not_error(self):
        game_id = self._new_game()["game_id"]
        r = self._reveal(game_id, {"category": 4, "clue": 0})
        self.assertEqual(r.status_code, 200)
        data = r.get_json()
        self.assertFalse(data["success"])
        self.assertTrue(data["ignored"])

        state = self.client.get(f"/api/game/{game_id}/state").get_json()["state"]
        self.assertTrue(all(c["state"] == "HIDDEN" for cat in state["categories"] for c in cat["clues"]))

    def test_given_missing_address_when_revealed_then_400(self):
        game_id = self._new_game()["game_id"]
        r = self._reveal(game_id, {"category": 0})
        self.assertEqual(r.status_code, 400)
        self.assertFalse(r.get_json()["success"])

    def test_given_unknown_game_when_requested_then_404(self):
        self.assertEqual(self.client.get("/api/game/nope/state").status_code, 404)
        self.assertEqual(self._reveal("nope", {"category": 0, "clue": 0}).status_code, 404)
        self.assertEqual(self.client.post("/api/game/nope/restart").status_code, 404)
        self.assertEqual(self.client.delete("/api/game/nope").status_code, 404)

    def test_given_catalog_without_valid_categories_when_new_game_then_503_and_failed_state(self):
        self.service.catalog = build_catalog([1] * 10)
        r = self.client.post("/api/new_game")
        self.assertEqual(r.status_code, 503)
        data = r.get_json()
        self.assertFalse(data["success"])
        self.assertIn("retry", data["error"])
        self.assertEqual(data["state"]["status"], "failed")
        self.assertEqual(data["state"]["categories"], [])

    def test_given_existing_game_when_restarted_then_new_generation_and_fresh_board(self):
        data = self._new_game()
        game_id = data["game_id"]
        self._reveal(game_id, {"category": 0, "clue": 0})

        r = self.client.post(f"/api/game/{game_id}/restart")
        self.assertEqual(r.status_code, 200)
        state = r.get_json()["state"]
        self.assertEqual(state["generation"], data["state"]["generation"] + 1)
        self.assertTrue(all(c["state"] == "HIDDEN" for cat in state["categories"] for c in cat["clues"]))

    def test_given_game_when_deleted_then_gone(self):
        game_id = self._new_game()["game_id"]
        r = self.client.delete(f"/api/game/{game_id}")
        self.assertEqual(r.status_code, 200)
        self.assertTrue(r.get_json()["success"])
        self.assertEqual(self.client.get(f"/api/game/{game_id}/state").status_code, 404)

    def test_given_health_endpoint_when_requested_then_reports_active_games(self):
        self._new_game()
        data = self.client.get("/api/health").get_json()
        self.assertEqual(data["status"], "healthy")
        self.assertEqual(data["active_games"], 1)


class TestWebSocketEvents(unittest.TestCase):
    def setUp(self):
        self._orig_service = game_service_mod._game_service
        self.service = game_service_mod.initialize_game_service(build_catalog([6] * 10), FourByThreeConfig)
        self.app, self.socketio = create_app(FourByThreeConfig)
        # Run background acquisitions inline so events arrive deterministically
        self.socketio.start_background_task = lambda target, *args, **kwargs: target(*args, **kwargs)
        self.game_id = self.service.create_game()
        self.ws = self.socketio.test_client(self.app)

    def tearDown(self):
        self.ws.disconnect()
        game_service_mod._game_service = self._orig_service

    def _events(self):
        return [(e["name"], e["args"][0]) for e in self.ws.get_received()]

    def test_given_joined_game_when_restarted_then_loading_then_ready(self):
        self.ws.emit("join_game", {"game_id": self.game_id})
        events = self._events()
        self.assertEqual(events[0][0], "board_state")
        self.assertEqual(events[0][1]["state"]["status"], "empty")

        self.ws.emit("restart_game", {"game_id": self.game_id})
        names = [name for name, _ in self._events()]
        self.assertEqual(names[:1], ["board_loading"])
        self.assertIn("board_ready", names)
        self.assertEqual(self.service.get_board_state(self.game_id).status, "ready")

    def test_given_failing_catalog_when_restarted_then_board_failed_event(self):
        self.service.catalog = build_catalog([0] * 10)
        self.ws.emit("join_game", {"game_id": self.game_id})
        self._events()

        self.ws.emit("restart_game", {"game_id": self.game_id})
        events = dict(self._events())
        self.assertIn("board_failed", events)
        self.assertIn("retry", events["board_failed"]["error"])

    def test_given_second_restart_when_first_acquisition_finishes_late_then_nothing_published(self):
        pending = []
        self.socketio.start_background_task = lambda target, *args, **kwargs: pending.append((target, args))
        self.ws.emit("join_game", {"game_id": self.game_id})
        self.ws.emit("restart_game", {"game_id": self.game_id})
        self.ws.emit("restart_game", {"game_id": self.game_id})
        loading = [payload["generation"] for name, payload in self._events() if name == "board_loading"]
        self.assertEqual(loading, [1, 2])
        self.assertEqual(len(pending), 2)

        target, args = pending[0]
        target(*args)
        self.assertEqual(self._events(), [])
        self.assertEqual(self.service.get_board_state(self.game_id).status, "loading")

        target, args = pending[1]
        target(*args)
        events = dict(self._events())
        self.assertEqual(list(events), ["board_ready"])
        self.assertEqual(events["board_ready"]["state"]["generation"], 2)
        self.assertEqual(self.service.get_board_state(self.game_id).status, "ready")

    def test_given_ready_board_when_clue_revealed_then_broadcast(self):
        self.service.new_board(self.game_id)
        self.ws.emit("join_game", {"game_id": self.game_id})
        self._events()

        self.ws.emit("reveal_clue", {"game_id": self.game_id, "category": 0, "clue": 0})
        events = dict(self._events())
        self.assertEqual(events["clue_revealed"]["state"], "QUESTION")

        self.ws.emit("reveal_clue", {"game_id": self.game_id, "category": 9, "clue": 0})
        self.assertEqual(self._events(), [])

    def test_given_unknown_game_when_joining_then_error_event(self):
        self.ws.emit("join_game", {"game_id": "missing"})
        events = dict(self._events())
        self.assertEqual(events["error"]["error"], "Game not found")


if __name__ == "__main__":
    unittest.main(verbosity=2)
