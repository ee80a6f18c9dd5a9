"""
Quiz Data Access

Repository interfaces consumed by the submission service and their Django ORM
implementations. ORM rows are converted to the frozen dataclasses of the
grading core here, so nothing past this module depends on Django models.

Repositories:
- QuizRepository: loads a quiz aggregate (questions and answers)
- AttemptRepository: saves and reads a user's attempt for a quiz

Attempt Policy:
    One attempt per (user, quiz). Saving overwrites the existing attempt and
    replaces all of its responses inside a single transaction, keyed by the
    (user, quiz) unique constraint with the row locked for update.

Author: LMS Development Team
Version: 1.0.0
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from django.db import DatabaseError, transaction
from django.db.models import F
from django.utils import timezone

from ..common.exceptions import NotFoundException, PersistenceFailureException
from .grading.types import (
    AnswerData,
    AttemptRecord,
    GradedQuestion,
    GradedResult,
    QuestionData,
    QuizData,
)
from .models import Quiz, QuizAttempt, UserQuestionResponse

logger = logging.getLogger(__name__)


class QuizRepository(ABC):
    """Read access to quiz aggregates."""

    @abstractmethod
    def get_quiz_with_questions_and_answers(self, quiz_id: int) -> QuizData:
        """
        Load a quiz with its questions and answers.

        Raises:
            NotFoundException: If the quiz does not exist
        """


class AttemptRepository(ABC):
    """Persistence of quiz attempts."""

    @abstractmethod
    def save_attempt(self, user_id: int, graded: GradedResult) -> int:
        """
        Atomically store the attempt and all of its responses.

        Returns:
            Identity of the stored attempt

        Raises:
            PersistenceFailureException: If nothing could be stored
        """

    @abstractmethod
    def get_attempt(self, user_id: int, quiz_id: int) -> Optional[AttemptRecord]:
        """Return the user's attempt for the quiz, or None if there is none."""


def quiz_to_data(quiz: Quiz) -> QuizData:
    """Convert a Quiz with prefetched questions and answers to QuizData."""
    return QuizData(
        id=quiz.id,
        title=quiz.title,
        pass_threshold=quiz.pass_threshold,
        questions=tuple(
            QuestionData(
                id=question.id,
                quiz_id=quiz.id,
                text=question.text,
                allows_multiple_answers=question.allows_multiple_answers,
                answers=tuple(
                    AnswerData(
                        id=answer.id,
                        question_id=question.id,
                        text=answer.text,
                        is_correct=answer.is_correct,
                    )
                    for answer in question.answers.all()
                ),
            )
            for question in quiz.questions.all()
        ),
    )


def attempt_to_record(attempt: QuizAttempt) -> AttemptRecord:
    """Convert a QuizAttempt with prefetched responses to an AttemptRecord."""
    return AttemptRecord(
        id=attempt.id,
        user_id=attempt.user_id,
        quiz_id=attempt.quiz_id,
        score=attempt.score,
        passed=attempt.passed,
        submitted_at=attempt.submitted_at,
        attempt_count=attempt.attempt_count,
        responses=tuple(
            GradedQuestion(
                question_id=response.question_id,
                selected_answer_ids=frozenset(response.selected_answer_ids),
                is_correct=response.is_correct,
            )
            for response in attempt.responses.all()
        ),
    )


class DjangoQuizRepository(QuizRepository):
    """QuizRepository backed by the Django ORM."""

    def get_quiz_with_questions_and_answers(self, quiz_id: int) -> QuizData:
        try:
            quiz = Quiz.objects.prefetch_related("questions__answers").get(pk=quiz_id)
        except Quiz.DoesNotExist:
            raise NotFoundException("Quiz", quiz_id)
        return quiz_to_data(quiz)


class DjangoAttemptRepository(AttemptRepository):
    """
    AttemptRepository backed by the Django ORM.

    The upsert runs in one transaction: the attempt row is created or locked
    and updated, its previous responses are deleted and the new ones inserted.
    Either all of it commits or none of it does.
    """

    def __init__(self):
        self.logger = logger

    def save_attempt(self, user_id: int, graded: GradedResult) -> int:
        now = timezone.now()
        try:
            with transaction.atomic():
                attempt, created = QuizAttempt.objects.select_for_update().get_or_create(
                    user_id=user_id,
                    quiz_id=graded.quiz_id,
                    defaults={
                        "score": graded.score,
                        "passed": graded.passed,
                        "submitted_at": now,
                    },
                )

                if not created:
                    attempt.score = graded.score
                    attempt.passed = graded.passed
                    attempt.submitted_at = now
                    attempt.attempt_count = F("attempt_count") + 1
                    attempt.save(
                        update_fields=["score", "passed", "submitted_at", "attempt_count"]
                    )
                    attempt.responses.all().delete()

                UserQuestionResponse.objects.bulk_create(
                    [
                        UserQuestionResponse(
                            attempt=attempt,
                            question_id=question.question_id,
                            selected_answer_ids=sorted(question.selected_answer_ids),
                            is_correct=question.is_correct,
                        )
                        for question in graded.questions
                    ]
                )
        except DatabaseError as e:
            self.logger.error(
                f"Saving attempt of user {user_id} for quiz {graded.quiz_id} failed: {e}"
            )
            raise PersistenceFailureException(
                f"Quiz attempt could not be saved: {e}",
                details={"user_id": user_id, "quiz_id": graded.quiz_id},
            ) from e

        action = "Created" if created else "Overwrote"
        self.logger.info(
            f"{action} attempt {attempt.pk} of user {user_id} for quiz {graded.quiz_id}"
        )
        return attempt.pk

    def get_attempt(self, user_id: int, quiz_id: int) -> Optional[AttemptRecord]:
        attempt = (
            QuizAttempt.objects.filter(user_id=user_id, quiz_id=quiz_id)
            .prefetch_related("responses")
            .first()
        )
        if attempt is None:
            return None
        return attempt_to_record(attempt)
