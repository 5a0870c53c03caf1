from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Sequence

_default_rng = random.Random()


@dataclass(frozen=True, slots=True)
class AnswerSet:
    options: tuple[str, ...]
    correct_index: int

    @classmethod
    def build(
        cls,
        correct: str,
        incorrects: Sequence[str],
        *,
        rng: random.Random | None = None,
    ) -> AnswerSet:
        return build_answer_set(correct, incorrects, rng=rng)

    @property
    def correct(self) -> str:
        return self.options[self.correct_index]

    def __len__(self) -> int:
        return len(self.options)


def build_answer_set(
    correct: str,
    incorrects: Sequence[str],
    *,
    rng: random.Random | None = None,
) -> AnswerSet:
    """Shuffle the correct answer in among the incorrect ones.

    Slot 0 of the combined list always holds the correct answer. The slots are
    permuted rather than the strings, so the correct position is known even when
    an incorrect answer has the same text.
    """
    combined = (correct, *incorrects)
    order = list(range(len(combined)))
    (rng or _default_rng).shuffle(order)
    return AnswerSet(
        options=tuple(combined[slot] for slot in order),
        correct_index=order.index(0),
    )
