from __future__ import annotations

from .client import ApiService
from .models import AnswerOption, FuelPrice, PresentationQuestion, QuestionKind, RawTriviaQuestion, TriviaResponse
from .quiz import transform_questions

__all__ = [
    "AnswerOption",
    "ApiService",
    "FuelPrice",
    "PresentationQuestion",
    "QuestionKind",
    "RawTriviaQuestion",
    "TriviaResponse",
    "transform_questions",
]

__version__ = "1.0.0"
