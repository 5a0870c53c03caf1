from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Hashable, Sequence

from trivia.game.questions.answer_set import AnswerSet, build_answer_set
from trivia.game.sessions.errors import InvalidAnswerOptionError

TRUE_ANSWER = "True"
FALSE_ANSWER = "False"


@dataclass(frozen=True, slots=True)
class RawQuestion:
    prompt: str
    correct_answer: str
    incorrect_answers: tuple[str, ...] = ()
    category: Hashable | None = None
    difficulty: Hashable | None = None


@dataclass(frozen=True, slots=True)
class Question:
    text: str
    answers: AnswerSet = field(default_factory=lambda: build_answer_set("", ()))
    category: Hashable | None = None
    difficulty: Hashable | None = None

    @classmethod
    def build(
        cls,
        text: str,
        correct: str,
        incorrects: Sequence[str],
        *,
        category: Hashable | None = None,
        difficulty: Hashable | None = None,
        rng: random.Random | None = None,
    ) -> Question:
        return cls(
            text=text,
            answers=build_answer_set(correct, incorrects, rng=rng),
            category=category,
            difficulty=difficulty,
        )

    @classmethod
    def build_true(cls, text: str, *, rng: random.Random | None = None) -> Question:
        return cls.build(text, TRUE_ANSWER, (FALSE_ANSWER,), rng=rng)

    @classmethod
    def build_false(cls, text: str, *, rng: random.Random | None = None) -> Question:
        return cls.build(text, FALSE_ANSWER, (TRUE_ANSWER,), rng=rng)

    @classmethod
    def from_raw(cls, raw: RawQuestion, *, rng: random.Random | None = None) -> Question:
        return cls.build(
            raw.prompt,
            raw.correct_answer,
            raw.incorrect_answers,
            category=raw.category,
            difficulty=raw.difficulty,
            rng=rng,
        )

    def is_correct(self, choice: int | str) -> bool:
        """Check a guess given as an option index or as answer text.

        The index form is exact. The text form only says whether the text is the
        right answer, which is all it can say when two options share a text.
        """
        if isinstance(choice, str):
            return choice == self.answers.correct
        if isinstance(choice, bool) or not isinstance(choice, int):
            raise InvalidAnswerOptionError(f"option must be an index or answer text, got {choice!r}")
        if not 0 <= choice < len(self.answers):
            raise InvalidAnswerOptionError(
                f"option {choice} is out of range for {len(self.answers)} options"
            )
        return choice == self.answers.correct_index
