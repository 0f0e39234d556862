"""Tests for the browser-mode HTTP API."""

from __future__ import annotations

import threading

from fastapi.testclient import TestClient
import pytest

from conftest import correct_code_for, wrong_code_for
from flag_quiz.core.game_controller import GameController
from flag_quiz.server.api_server import create_api_app


@pytest.fixture
def client(controller: GameController) -> TestClient:
    return TestClient(create_api_app(controller))


class TestPlayerPage:
    def test_serves_html(self, client: TestClient) -> None:
        response = client.get("/")

        assert response.status_code == 200
        assert "text/html" in response.headers["content-type"]
        assert "FlagQuiz" in response.text


class TestGameFlow:
    """Start, answer and advance through the HTTP endpoints."""

    def test_state_before_start(self, client: TestClient) -> None:
        state = client.get("/question").json()

        assert state["started"] is False
        assert state["question"] is None
        assert state["awaiting_answer"] is False

    def test_start_returns_first_question(self, client: TestClient, countries) -> None:
        state = client.post("/start").json()

        assert state["started"] is True
        assert state["asked"] == 1
        assert state["total"] == len(countries)
        assert state["awaiting_answer"] is True
        question = state["question"]
        assert question["flag_url"].startswith("https://flagcdn.com/")
        assert 1 <= len(question["options"]) <= 6
        assert {"code", "label"} <= set(question["options"][0])

    def test_correct_answer(self, client: TestClient, controller: GameController) -> None:
        client.post("/start")
        code = correct_code_for(controller)

        response = client.post("/answer", json={"code": code})

        assert response.status_code == 201
        body = response.json()
        assert body["is_correct"] is True
        assert body["correct_code"] == code
        assert body["score"] == 1

    def test_wrong_answer_reveals_correct_code(self, client: TestClient, controller: GameController) -> None:
        client.post("/start")
        while wrong_code_for(controller) is None:
            client.post("/answer", json={"code": correct_code_for(controller)})
            client.post("/next")
        correct = correct_code_for(controller)

        body = client.post("/answer", json={"code": wrong_code_for(controller)}).json()

        assert body["is_correct"] is False
        assert body["correct_code"] == correct

    def test_second_answer_conflicts(self, client: TestClient, controller: GameController) -> None:
        client.post("/start")
        code = correct_code_for(controller)
        client.post("/answer", json={"code": code})

        response = client.post("/answer", json={"code": code})

        assert response.status_code == 409
        assert controller.get_score() == 1

    def test_unknown_option_is_unprocessable(self, client: TestClient) -> None:
        client.post("/start")
        response = client.post("/answer", json={"code": "ZZ"})
        assert response.status_code == 422

    def test_missing_code_is_unprocessable(self, client: TestClient) -> None:
        client.post("/start")
        response = client.post("/answer", json={})
        assert response.status_code == 422

    def test_next_requires_start(self, client: TestClient) -> None:
        assert client.post("/next").status_code == 409

    def test_next_requires_answer(self, client: TestClient) -> None:
        client.post("/start")
        assert client.post("/next").status_code == 409

    def test_state_after_answer_shows_result(self, client: TestClient, controller: GameController) -> None:
        client.post("/start")
        client.post("/answer", json={"code": correct_code_for(controller)})

        state = client.get("/question").json()

        assert state["awaiting_answer"] is False
        assert state["result"]["is_correct"] is True
        assert state["question"] is not None


class TestSummary:
    def test_summary_unavailable_during_game(self, client: TestClient) -> None:
        client.post("/start")
        assert client.get("/summary").status_code == 409

    def test_full_game_ends_with_summary(self, client: TestClient, controller: GameController, countries) -> None:
        state = client.post("/start").json()
        while not state["finished"]:
            client.post("/answer", json={"code": correct_code_for(controller)})
            state = client.post("/next").json()

        assert state["question"] is None
        summary = client.get("/summary").json()
        assert summary["mode"] == "percentage"
        assert summary["score"] == len(countries)
        assert summary["percentage"] == 100
        assert summary["message"] == "Perfect!"
        assert [row["continent"] for row in summary["breakdown"]] == ["Antarctica", "Europe", "Oceania"]

    def test_restart_after_finish(self, client: TestClient, controller: GameController) -> None:
        state = client.post("/start").json()
        while not state["finished"]:
            client.post("/answer", json={"code": correct_code_for(controller)})
            state = client.post("/next").json()

        state = client.post("/start").json()

        assert state["finished"] is False
        assert state["score"] == 0
        assert state["asked"] == 1


class TestConcurrentRequests:
    """Requests racing each other must not skip or double-score questions."""

    WORKERS = 4

    def _race(self, send) -> list[int]:
        barrier = threading.Barrier(self.WORKERS)
        codes: list[int] = []
        codes_lock = threading.Lock()

        def worker() -> None:
            barrier.wait()
            status = send().status_code
            with codes_lock:
                codes.append(status)

        threads = [threading.Thread(target=worker) for _ in range(self.WORKERS)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join(timeout=30)
        return codes

    def test_racing_answers(self, client: TestClient, controller: GameController) -> None:
        client.post("/start")
        code = correct_code_for(controller)

        codes = self._race(lambda: client.post("/answer", json={"code": code}))

        assert sorted(codes) == [201] + [409] * (self.WORKERS - 1)
        assert controller.get_score() == 1

    def test_racing_next(self, client: TestClient, controller: GameController) -> None:
        client.post("/start")
        client.post("/answer", json={"code": correct_code_for(controller)})
        remaining_before = controller.get_remaining_count()

        codes = self._race(lambda: client.post("/next"))

        assert sorted(codes) == [200] + [409] * (self.WORKERS - 1)
        assert controller.get_remaining_count() == remaining_before - 1
        assert client.get("/question").json()["asked"] == 2

    def test_second_next_is_rejected(self, client: TestClient, controller: GameController) -> None:
        client.post("/start")
        client.post("/answer", json={"code": correct_code_for(controller)})

        assert client.post("/next").status_code == 200
        assert client.post("/next").status_code == 409
