from __future__ import annotations

from typing import Any

import pytest

from trivia.game.questions import open_trivia
from trivia.game.questions.open_trivia import (
    OpenTriviaSource,
    build_query_params,
    parse_response,
)
from trivia.game.sessions.errors import OpenTriviaError, QuestionSourceError
from trivia.game.sessions.settings import QuizSettings


class _Response:
    def __init__(self, body: dict[str, Any]) -> None:
        self._body = body

    def raise_for_status(self) -> None:
        return None

    def json(self) -> dict[str, Any]:
        return self._body


class _Client:
    def __init__(self, calls: list[dict[str, Any]], body: dict[str, Any]) -> None:
        self._calls = calls
        self._body = body

    async def __aenter__(self) -> "_Client":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:  # type: ignore[override]
        return None

    async def get(self, url: str, params: dict[str, str]) -> _Response:
        self._calls.append({"url": url, "params": params})
        return _Response(self._body)


def _patch_http_client(
    monkeypatch: pytest.MonkeyPatch,
    calls: list[dict[str, Any]],
    body: dict[str, Any],
) -> None:
    def factory(timeout: float) -> _Client:  # noqa: ARG001
        return _Client(calls, body)

    monkeypatch.setattr(open_trivia.httpx, "AsyncClient", factory)


_RESULT = {
    "type": "multiple",
    "difficulty": "hard",
    "category": "Entertainment: Board Games",
    "question": "Which piece moves diagonally?",
    "correct_answer": "Bishop",
    "incorrect_answers": ["Rook", "Knight", "King"],
}


def test_build_query_params_omits_missing_labels() -> None:
    assert build_query_params(QuizSettings(question_count=10)) == {"amount": "10"}
    assert build_query_params(QuizSettings(question_count=3, category=16, difficulty="hard")) == {
        "amount": "3",
        "category": "16",
        "difficulty": "hard",
    }


def test_parse_response_maps_results() -> None:
    questions = parse_response({"response_code": 0, "results": [_RESULT]})

    assert len(questions) == 1
    assert questions[0].prompt == "Which piece moves diagonally?"
    assert questions[0].correct_answer == "Bishop"
    assert questions[0].incorrect_answers == ("Rook", "Knight", "King")
    assert questions[0].category == "Entertainment: Board Games"
    assert questions[0].difficulty == "hard"


@pytest.mark.parametrize("response_code", [1, 2, 3, 4, 5, 9])
def test_parse_response_rejects_error_codes(response_code: int) -> None:
    with pytest.raises(OpenTriviaError) as exc_info:
        parse_response({"response_code": response_code, "results": []})

    assert exc_info.value.response_code == response_code


def test_parse_response_rejects_incomplete_result() -> None:
    with pytest.raises(QuestionSourceError):
        parse_response({"response_code": 0, "results": [{"question": "No answer?"}]})


@pytest.mark.asyncio
async def test_fetch_requests_configured_url(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[dict[str, Any]] = []
    _patch_http_client(monkeypatch, calls, {"response_code": 0, "results": [_RESULT]})
    source = OpenTriviaSource(url="https://trivia.example.local/api.php", timeout_seconds=2.0)

    questions = await source.fetch(QuizSettings(question_count=1, category=16))

    assert calls == [
        {
            "url": "https://trivia.example.local/api.php",
            "params": {"amount": "1", "category": "16"},
        }
    ]
    assert [question.correct_answer for question in questions] == ["Bishop"]


@pytest.mark.asyncio
async def test_fetch_raises_on_rate_limit(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[dict[str, Any]] = []
    _patch_http_client(monkeypatch, calls, {"response_code": 5, "results": []})
    source = OpenTriviaSource(url="https://trivia.example.local/api.php")

    with pytest.raises(OpenTriviaError) as exc_info:
        await source.fetch(QuizSettings(question_count=10))

    assert exc_info.value.response_code == 5
    assert len(calls) == 1


def test_source_defaults_come_from_settings() -> None:
    source = OpenTriviaSource()

    assert source.url == "https://opentdb.com/api.php"
    assert source.timeout_seconds == 10.0


def test_parse_response_treats_null_results_as_empty() -> None:
    assert parse_response({"response_code": 0, "results": None}) == []


@pytest.mark.parametrize("results", [{"question": "Q?"}, "Q?", 3])
def test_parse_response_rejects_non_list_results(results: object) -> None:
    with pytest.raises(QuestionSourceError):
        parse_response({"response_code": 0, "results": results})
