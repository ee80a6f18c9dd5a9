"""
Quiz Submission Service

Orchestrates a quiz submission end to end:

1. Load the quiz aggregate (NotFoundException if absent)
2. Validate the submission (nothing is persisted on failure)
3. Grade it
4. Persist the attempt and its responses atomically
5. Return the QuizResult

Also answers the two read questions about a user's attempt. Both read paths
follow the same overwrite-on-resubmission policy as the write path: the
single stored attempt per (user, quiz) is the relevant one.

Author: LMS Development Team
Version: 1.0.0
"""

import logging
from typing import Optional

from ..grading import (
    AttemptRecord,
    GradingEngine,
    QuizResult,
    QuizValidationService,
    SubmitQuiz,
)
from ..repositories import (
    AttemptRepository,
    DjangoAttemptRepository,
    DjangoQuizRepository,
    QuizRepository,
)

logger = logging.getLogger(__name__)


class QuizSubmissionService:
    """
    Submission and attempt lookup service.

    Collaborators are passed in so tests can substitute in-memory fakes;
    ``default()`` wires the Django ORM implementations.
    """

    def __init__(
        self,
        quiz_repository: QuizRepository,
        attempt_repository: AttemptRepository,
        validator: Optional[QuizValidationService] = None,
        grading_engine: Optional[GradingEngine] = None,
    ):
        self.quiz_repository = quiz_repository
        self.attempt_repository = attempt_repository
        self.validator = validator or QuizValidationService()
        self.grading_engine = grading_engine or GradingEngine()
        self.logger = logger

    @classmethod
    def default(cls) -> "QuizSubmissionService":
        return cls(DjangoQuizRepository(), DjangoAttemptRepository())

    def submit_quiz(self, submission: SubmitQuiz) -> QuizResult:
        """
        Validate, grade and persist a submission.

        Args:
            submission: Raw submission of a user for a quiz

        Returns:
            QuizResult with score, pass flag, per-question breakdown and attempt id

        Raises:
            NotFoundException: The quiz does not exist
            SubmissionValidationException: The submission is structurally invalid
            InvalidQuizStateException: The quiz has no questions
            PersistenceFailureException: The attempt could not be stored
        """
        quiz = self.quiz_repository.get_quiz_with_questions_and_answers(submission.quiz_id)

        validated = self.validator.validate(quiz, submission)
        graded = self.grading_engine.grade(quiz, validated)

        attempt_id = self.attempt_repository.save_attempt(submission.user_id, graded)

        self.logger.info(
            f"User {submission.user_id} scored {graded.score}% on quiz {quiz.id} "
            f"({graded.correct_count}/{len(graded.questions)} correct, "
            f"{'passed' if graded.passed else 'failed'})"
        )

        return QuizResult(
            attempt_id=attempt_id,
            quiz_id=quiz.id,
            score=graded.score,
            passed=graded.passed,
            questions=graded.questions,
        )

    def get_user_quiz_attempt(self, user_id: int, quiz_id: int) -> Optional[AttemptRecord]:
        """Return the user's attempt for the quiz, or None."""
        return self.attempt_repository.get_attempt(user_id, quiz_id)

    def has_user_passed_quiz(self, user_id: int, quiz_id: int) -> bool:
        """True iff the user's attempt exists and passed. No attempt is not an error."""
        attempt = self.attempt_repository.get_attempt(user_id, quiz_id)
        return attempt is not None and attempt.passed
