from __future__ import annotations

from dataclasses import dataclass
from typing import Hashable

from trivia.core.config import Settings, get_settings
from trivia.game.sessions.errors import InvalidQuestionCountError


@dataclass(frozen=True, slots=True)
class QuizSettings:
    question_count: int
    category: Hashable | None = None
    difficulty: Hashable | None = None

    def __post_init__(self) -> None:
        if isinstance(self.question_count, bool) or not isinstance(self.question_count, int):
            raise InvalidQuestionCountError(
                f"question count must be an integer, got {self.question_count!r}"
            )
        if self.question_count <= 0:
            raise InvalidQuestionCountError(
                f"question count must be positive, got {self.question_count}"
            )

    @classmethod
    def from_config(cls, config: Settings | None = None) -> QuizSettings:
        resolved = config or get_settings()
        return cls(
            question_count=resolved.quiz_question_count,
            category=resolved.quiz_category,
            difficulty=resolved.quiz_difficulty,
        )
