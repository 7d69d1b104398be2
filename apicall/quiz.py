from __future__ import annotations

import logging
import random
from typing import Iterable, List, MutableSequence, Optional, TypeVar

from .models import AnswerOption, PresentationQuestion, QuestionKind, RawTriviaQuestion
from .utils.text import decode_html

logger = logging.getLogger(__name__)

T = TypeVar("T")


def fisher_yates_shuffle(items: MutableSequence[T], rng: random.Random) -> None:
    """Uniform in-place permutation: for i from last down to 1, swap with a random j in [0, i]."""
    for i in range(len(items) - 1, 0, -1):
        j = rng.randrange(i + 1)
        items[i], items[j] = items[j], items[i]


def _boolean_options(correct: str) -> List[AnswerOption]:
    c = correct.strip().lower()
    return [
        AnswerOption(text="True", is_correct=c == "true"),
        AnswerOption(text="False", is_correct=c == "false"),
    ]


def build_options(raw: RawTriviaQuestion, rng: random.Random) -> List[AnswerOption]:
    correct = decode_html(raw.correct_answer)
    if raw.kind is QuestionKind.BOOLEAN:
        return _boolean_options(correct)

    options = [AnswerOption(text=correct, is_correct=True)]
    options.extend(AnswerOption(text=decode_html(x), is_correct=False) for x in raw.incorrect_answers)
    fisher_yates_shuffle(options, rng)
    return options


def transform_question(raw: RawTriviaQuestion, rng: random.Random) -> PresentationQuestion:
    return PresentationQuestion(
        category=decode_html(raw.category),
        difficulty=decode_html(raw.difficulty),
        question=decode_html(raw.question),
        options=build_options(raw, rng),
    )


def transform_questions(
    raw_questions: Iterable[RawTriviaQuestion],
    rng: Optional[random.Random] = None,
) -> List[PresentationQuestion]:
    """
    Turn raw Open Trivia DB records into presentation-ready questions.

    Question order is preserved. Multiple-choice options are shuffled with ``rng``;
    boolean questions always get "True" then "False". Pass a seeded
    ``random.Random`` for reproducible output. Without one a private generator is
    created for this call.
    """
    rng = rng if rng is not None else random.Random()
    out = [transform_question(q, rng) for q in raw_questions]
    logger.debug("Transformed %d trivia questions", len(out))
    return out
