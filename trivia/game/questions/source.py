from __future__ import annotations

from typing import Iterable, Protocol

from trivia.game.questions.types import RawQuestion
from trivia.game.sessions.settings import QuizSettings


class QuestionSource(Protocol):
    async def fetch(self, settings: QuizSettings) -> list[RawQuestion]: ...


class StaticQuestionSource:
    """Serves questions from an in-memory pool, in pool order."""

    def __init__(self, questions: Iterable[RawQuestion]) -> None:
        self._questions = tuple(questions)

    async def fetch(self, settings: QuizSettings) -> list[RawQuestion]:
        return list(self._questions[: settings.question_count])
