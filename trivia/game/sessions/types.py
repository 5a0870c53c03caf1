from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeAlias

from trivia.game.sessions.outcome import QuizOutcome

if TYPE_CHECKING:
    from trivia.game.sessions.session import QuizSession


@dataclass(frozen=True, slots=True)
class Continuing:
    session: QuizSession


@dataclass(frozen=True, slots=True)
class Finished:
    outcome: QuizOutcome


GuessResult: TypeAlias = "Continuing | Finished"
