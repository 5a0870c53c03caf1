from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable

from trivia.game.questions.types import Question
from trivia.game.sessions.errors import InvalidSessionStateError, NoCurrentQuestionError
from trivia.game.sessions.outcome import QuizOutcome
from trivia.game.sessions.settings import QuizSettings
from trivia.game.sessions.types import Continuing, Finished, GuessResult


@dataclass(frozen=True, slots=True)
class QuizSession:
    """Immutable walk through a fixed list of questions.

    ``step`` is 1-based and points at the question awaiting a guess. A guess never
    changes the session it is made on: it returns ``Continuing`` with the next
    session value, or ``Finished`` once the last question has been scored.
    """

    questions: tuple[Question, ...] = ()
    step: int = 1
    score: int = 0
    settings: QuizSettings | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.questions, tuple):
            object.__setattr__(self, "questions", tuple(self.questions))
        if not 1 <= self.step <= len(self.questions) + 1:
            raise InvalidSessionStateError(
                f"step {self.step} is outside 1..{len(self.questions) + 1}"
            )
        if not 0 <= self.score <= min(self.step - 1, len(self.questions)):
            raise InvalidSessionStateError(
                f"score {self.score} is impossible at step {self.step}"
            )

    @classmethod
    def start(
        cls,
        questions: Iterable[Question],
        settings: QuizSettings | None = None,
    ) -> QuizSession:
        return cls(questions=tuple(questions), settings=settings)

    @property
    def total(self) -> int:
        return len(self.questions)

    @property
    def remaining(self) -> int:
        return self.total - (self.step - 1)

    @property
    def is_empty(self) -> bool:
        return not self.questions

    def current(self) -> Question:
        if self.step > self.total:
            raise NoCurrentQuestionError(
                f"step {self.step} has no question, session holds {self.total}"
            )
        return self.questions[self.step - 1]

    def guess(self, choice: int | str) -> GuessResult:
        if self.is_empty:
            return Finished(QuizOutcome.empty())

        is_correct = self.current().is_correct(choice)
        next_step = self.step + 1
        next_score = self.score + 1 if is_correct else self.score

        if next_step > self.total:
            return Finished(QuizOutcome.build(next_score, self.total))
        return Continuing(replace(self, step=next_step, score=next_score))

    def to_outcome(self) -> QuizOutcome:
        # Early quit still counts every question, answered or not.
        if self.is_empty:
            return QuizOutcome.empty()
        return QuizOutcome.build(self.score, self.total)
