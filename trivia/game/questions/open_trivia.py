from __future__ import annotations

from typing import Any

import httpx
import structlog

from trivia.core.config import get_settings
from trivia.game.questions.types import RawQuestion
from trivia.game.sessions.errors import OpenTriviaError, QuestionSourceError
from trivia.game.sessions.settings import QuizSettings

logger = structlog.get_logger("trivia.game.questions.open_trivia")

RESPONSE_CODE_SUCCESS = 0
RESPONSE_CODE_MESSAGES: dict[int, str] = {
    1: "not enough questions for the query",
    2: "invalid parameter",
    3: "session token not found",
    4: "session token exhausted",
    5: "rate limit exceeded",
}


def build_query_params(settings: QuizSettings) -> dict[str, str]:
    params = {"amount": str(settings.question_count)}
    if settings.category is not None:
        params["category"] = str(settings.category)
    if settings.difficulty is not None:
        params["difficulty"] = str(settings.difficulty)
    return params


def _to_raw_question(result: dict[str, Any]) -> RawQuestion:
    try:
        return RawQuestion(
            prompt=result["question"],
            correct_answer=result["correct_answer"],
            incorrect_answers=tuple(result.get("incorrect_answers") or ()),
            category=result.get("category"),
            difficulty=result.get("difficulty"),
        )
    except KeyError as exc:
        raise QuestionSourceError(f"open trivia result is missing {exc.args[0]!r}") from exc


def parse_response(body: dict[str, Any]) -> list[RawQuestion]:
    response_code = int(body.get("response_code", RESPONSE_CODE_SUCCESS))
    if response_code != RESPONSE_CODE_SUCCESS:
        raise OpenTriviaError(
            response_code,
            RESPONSE_CODE_MESSAGES.get(response_code, "unknown response code"),
        )
    results = body.get("results") or []
    if not isinstance(results, list):
        raise QuestionSourceError(f"open trivia results must be a list, got {type(results).__name__}")
    return [_to_raw_question(result) for result in results]


class OpenTriviaSource:
    """Question source backed by the Open Trivia Database JSON API.

    Question and answer texts are returned as received; the API HTML-encodes
    them and decoding is left to whoever renders them.
    """

    def __init__(self, *, url: str | None = None, timeout_seconds: float | None = None) -> None:
        settings = get_settings()
        self.url = url or settings.open_trivia_url
        self.timeout_seconds = (
            timeout_seconds if timeout_seconds is not None else settings.open_trivia_timeout_seconds
        )

    async def fetch(self, settings: QuizSettings) -> list[RawQuestion]:
        params = build_query_params(settings)
        async with httpx.AsyncClient(timeout=self.timeout_seconds) as client:
            response = await client.get(self.url, params=params)
            response.raise_for_status()
            body = response.json()

        try:
            questions = parse_response(body)
        except OpenTriviaError as exc:
            logger.warning(
                "open_trivia_request_rejected",
                response_code=exc.response_code,
                amount=settings.question_count,
            )
            raise
        logger.info(
            "open_trivia_questions_fetched",
            requested=settings.question_count,
            received=len(questions),
        )
        return questions
