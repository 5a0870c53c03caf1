from __future__ import annotations

import random

import structlog

from trivia.game.questions.source import QuestionSource
from trivia.game.questions.types import Question
from trivia.game.sessions.outcome import QuizOutcome
from trivia.game.sessions.session import QuizSession
from trivia.game.sessions.settings import QuizSettings
from trivia.game.sessions.types import Finished, GuessResult

logger = structlog.get_logger("trivia.game.sessions")


async def start_quiz(
    source: QuestionSource,
    settings: QuizSettings,
    *,
    rng: random.Random | None = None,
) -> QuizSession:
    raw_questions = await source.fetch(settings)
    session = QuizSession.start(
        (Question.from_raw(raw, rng=rng) for raw in raw_questions),
        settings=settings,
    )
    logger.info(
        "quiz_session_started",
        requested=settings.question_count,
        total=session.total,
        category=settings.category,
        difficulty=settings.difficulty,
    )
    return session


def submit_guess(session: QuizSession, choice: int | str) -> GuessResult:
    result = session.guess(choice)
    if isinstance(result, Finished):
        logger.info(
            "quiz_session_finished",
            score=result.outcome.score,
            total=result.outcome.total,
            is_perfect=result.outcome.is_perfect,
            is_passing=result.outcome.is_passing,
        )
    else:
        logger.debug(
            "quiz_guess_submitted",
            step=session.step,
            next_step=result.session.step,
            is_correct=result.session.score > session.score,
        )
    return result


def abandon_quiz(session: QuizSession) -> QuizOutcome:
    outcome = session.to_outcome()
    logger.info(
        "quiz_session_abandoned",
        step=session.step,
        score=outcome.score,
        total=outcome.total,
    )
    return outcome
