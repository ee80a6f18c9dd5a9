"""
Plain data structures exchanged by the grading core.

Quizzes are loaded into these frozen dataclasses at the repository boundary,
so validation and grading run on in-memory data without touching the ORM and
cannot mutate the quiz.

Author: LMS Development Team
Version: 1.0.0
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import FrozenSet, Optional, Tuple


@dataclass(frozen=True)
class AnswerData:
    """Candidate answer of a question."""
    id: int
    question_id: int
    text: str
    is_correct: bool


@dataclass(frozen=True)
class QuestionData:
    """Question with its candidate answers."""
    id: int
    quiz_id: int
    text: str
    allows_multiple_answers: bool
    answers: Tuple[AnswerData, ...] = ()

    @property
    def answer_ids(self) -> FrozenSet[int]:
        return frozenset(answer.id for answer in self.answers)

    @property
    def correct_answer_ids(self) -> FrozenSet[int]:
        return frozenset(answer.id for answer in self.answers if answer.is_correct)


@dataclass(frozen=True)
class QuizData:
    """Quiz aggregate as seen by validation and grading."""
    id: int
    title: str
    pass_threshold: int
    questions: Tuple[QuestionData, ...] = ()

    def question_by_id(self, question_id: int) -> Optional[QuestionData]:
        for question in self.questions:
            if question.id == question_id:
                return question
        return None


@dataclass(frozen=True)
class QuestionSubmission:
    """Answers a learner selected for one question."""
    question_id: int
    selected_answer_ids: FrozenSet[int] = frozenset()


@dataclass(frozen=True)
class SubmitQuiz:
    """Raw, untrusted quiz submission."""
    quiz_id: int
    user_id: int
    responses: Tuple[QuestionSubmission, ...] = ()


@dataclass(frozen=True)
class ValidatedSubmission:
    """
    Submission that passed structural validation.

    Only QuizValidationService creates these; grading relies on every question
    and answer id belonging to the quiz.
    """
    quiz_id: int
    user_id: int
    responses: Tuple[QuestionSubmission, ...] = ()

    def selected_for(self, question_id: int) -> FrozenSet[int]:
        for response in self.responses:
            if response.question_id == question_id:
                return response.selected_answer_ids
        return frozenset()


@dataclass(frozen=True)
class GradedQuestion:
    """Correctness of one question."""
    question_id: int
    selected_answer_ids: FrozenSet[int]
    is_correct: bool


@dataclass(frozen=True)
class GradedResult:
    """Outcome of grading a validated submission, one entry per quiz question."""
    quiz_id: int
    score: int
    passed: bool
    questions: Tuple[GradedQuestion, ...] = ()

    @property
    def correct_count(self) -> int:
        return sum(1 for question in self.questions if question.is_correct)


@dataclass(frozen=True)
class QuizResult:
    """Result returned to the caller of a quiz submission."""
    attempt_id: int
    quiz_id: int
    score: int
    passed: bool
    questions: Tuple[GradedQuestion, ...] = ()


@dataclass(frozen=True)
class AttemptRecord:
    """Persisted attempt as read back from the attempt store."""
    id: int
    user_id: int
    quiz_id: int
    score: int
    passed: bool
    submitted_at: datetime
    attempt_count: int = 1
    responses: Tuple[GradedQuestion, ...] = field(default_factory=tuple)
