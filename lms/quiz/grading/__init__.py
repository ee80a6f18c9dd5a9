"""
Quiz Grading Core

Pure validation and grading of quiz submissions over plain data:
- types: frozen dataclasses for quizzes, submissions and results
- validation: structural checks of a submission
- engine: correctness and score computation

Author: LMS Development Team
Version: 1.0.0
"""

from .types import (
    AnswerData,
    QuestionData,
    QuizData,
    QuestionSubmission,
    SubmitQuiz,
    ValidatedSubmission,
    GradedQuestion,
    GradedResult,
    QuizResult,
    AttemptRecord,
)
from .validation import QuizValidationService
from .engine import GradingEngine, calculate_score

__all__ = [
    # Data
    "AnswerData",
    "QuestionData",
    "QuizData",
    "QuestionSubmission",
    "SubmitQuiz",
    "ValidatedSubmission",
    "GradedQuestion",
    "GradedResult",
    "QuizResult",
    "AttemptRecord",
    # Services
    "QuizValidationService",
    "GradingEngine",
    "calculate_score",
]
