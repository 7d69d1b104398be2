from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Tuple

from .utils.text import get_ci

_FRACTION_RE = re.compile(r"\.(\d+)")


def _parse_iso(dt: Any) -> Optional[datetime]:
    if not isinstance(dt, str) or not dt.strip():
        return None
    try:
        s = dt.strip().replace("Z", "+00:00")
        # fromisoformat before 3.11 only takes 3 or 6 fractional digits
        s = _FRACTION_RE.sub(lambda m: "." + (m.group(1) + "000000")[:6], s, count=1)
        return datetime.fromisoformat(s)
    except ValueError:
        return None


def _text(v: Any) -> str:
    if v is None:
        return ""
    return str(v)


@dataclass(frozen=True)
class FuelPrice:
    """One point of a fuel price feed (diesel or Miles95)."""

    fuel: str
    date: Optional[datetime]
    price: Optional[str]

    @property
    def price_value(self) -> Optional[Decimal]:
        if self.price is None:
            return None
        s = self.price.strip().replace(",", "")
        if not s:
            return None
        try:
            value = Decimal(s)
        except InvalidOperation:
            return None
        if not value.is_finite():
            return None
        return value

    @classmethod
    def from_dict(cls, fuel: str, doc: Mapping[str, Any]) -> "FuelPrice":
        price = get_ci(doc, "price")
        return cls(
            fuel=fuel,
            date=_parse_iso(get_ci(doc, "date")),
            price=None if price is None else str(price),
        )


class QuestionKind(str, Enum):
    MULTIPLE = "multiple"
    BOOLEAN = "boolean"

    @classmethod
    def parse(cls, value: Any) -> "QuestionKind":
        # unknown kinds are served as multiple choice
        s = _text(value).strip().lower()
        if s == cls.BOOLEAN.value:
            return cls.BOOLEAN
        return cls.MULTIPLE


@dataclass(frozen=True)
class RawTriviaQuestion:
    category: str
    kind: QuestionKind
    difficulty: str
    question: str
    correct_answer: str
    incorrect_answers: Tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, doc: Mapping[str, Any]) -> "RawTriviaQuestion":
        incorrect = get_ci(doc, "incorrect_answers")
        if not isinstance(incorrect, list):
            incorrect = []
        return cls(
            category=_text(get_ci(doc, "category")),
            kind=QuestionKind.parse(get_ci(doc, "type")),
            difficulty=_text(get_ci(doc, "difficulty")),
            question=_text(get_ci(doc, "question")),
            correct_answer=_text(get_ci(doc, "correct_answer")),
            incorrect_answers=tuple(_text(x) for x in incorrect),
        )


@dataclass(frozen=True)
class TriviaResponse:
    """Open Trivia DB envelope. ``response_code`` 0 means success."""

    response_code: int = 0
    results: List[RawTriviaQuestion] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.response_code == 0 and bool(self.results)

    @classmethod
    def from_dict(cls, doc: Optional[Mapping[str, Any]]) -> "TriviaResponse":
        if not doc:
            return cls()
        code = get_ci(doc, "response_code", 0)
        results = get_ci(doc, "results")
        if not isinstance(results, list):
            results = []
        return cls(
            response_code=int(code or 0),
            results=[RawTriviaQuestion.from_dict(r) for r in results if isinstance(r, dict)],
        )


@dataclass
class AnswerOption:
    text: str
    is_correct: bool


@dataclass
class PresentationQuestion:
    category: str
    difficulty: str
    question: str
    # shuffled order, do not sort
    options: List[AnswerOption] = field(default_factory=list)

    @property
    def correct_options(self) -> List[AnswerOption]:
        return [o for o in self.options if o.is_correct]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "category": self.category,
            "difficulty": self.difficulty,
            "question": self.question,
            "options": [{"text": o.text, "is_correct": o.is_correct} for o in self.options],
        }
