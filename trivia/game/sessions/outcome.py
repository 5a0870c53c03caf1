from __future__ import annotations

from dataclasses import dataclass, field

from trivia.game.sessions.errors import InvalidOutcomeError

PASSING_RATIO = 0.7


@dataclass(frozen=True, slots=True)
class QuizOutcome:
    score: int
    total: int
    passing_ratio: float = field(default=PASSING_RATIO, compare=False)

    def __post_init__(self) -> None:
        if self.total < 0:
            raise InvalidOutcomeError(f"total must not be negative, got {self.total}")
        if self.score < 0:
            raise InvalidOutcomeError(f"score must not be negative, got {self.score}")
        if self.score > self.total:
            raise InvalidOutcomeError(f"score {self.score} exceeds total {self.total}")

    @classmethod
    def build(cls, score: int, total: int, *, passing_ratio: float = PASSING_RATIO) -> QuizOutcome:
        if total < 1:
            raise InvalidOutcomeError(f"total must be positive, got {total}")
        return cls(score=score, total=total, passing_ratio=passing_ratio)

    @classmethod
    def empty(cls) -> QuizOutcome:
        # Zero questions asked is a legal summary the strict factory rejects.
        return cls(score=0, total=0)

    @property
    def ratio(self) -> float:
        if self.total == 0:
            return 0.0
        return self.score / self.total

    @property
    def is_perfect(self) -> bool:
        return self.score == self.total

    @property
    def is_passing(self) -> bool:
        return self.ratio >= self.passing_ratio
