"""
Quiz Submission Validation

Structural checks a submission has to pass before it may be graded. The checks
run in a fixed order and stop at the first violation:

1. The submission targets the quiz that was loaded.
2. No question appears twice.
3. Every question belongs to the quiz.
4. Every selected answer belongs to its question.
5. Single-answer questions have at most one selected answer.

Questions left out of the submission are allowed; grading scores them as
incorrect.

Author: LMS Development Team
Version: 1.0.0
"""

from typing import Set

from ...common.exceptions import SubmissionValidationException, ValidationRule
from .types import QuizData, SubmitQuiz, ValidatedSubmission


class QuizValidationService:
    """
    Validates raw quiz submissions against the quiz structure.

    Stateless; a single instance can be shared between requests.
    """

    def validate(self, quiz: QuizData, submission: SubmitQuiz) -> ValidatedSubmission:
        """
        Check ``submission`` against ``quiz``.

        Args:
            quiz: Quiz aggregate with questions and answers
            submission: Raw submission

        Returns:
            ValidatedSubmission with the same content, safe to grade

        Raises:
            SubmissionValidationException: On the first violated rule
        """
        self._check_quiz(quiz, submission)
        self._check_duplicates(submission)
        self._check_questions(quiz, submission)
        self._check_answers(quiz, submission)
        self._check_single_answer(quiz, submission)

        return ValidatedSubmission(
            quiz_id=submission.quiz_id,
            user_id=submission.user_id,
            responses=tuple(submission.responses),
        )

    @staticmethod
    def _check_quiz(quiz: QuizData, submission: SubmitQuiz) -> None:
        if submission.quiz_id != quiz.id:
            raise SubmissionValidationException(
                ValidationRule.QUIZ_MISMATCH,
                f"Submission targets quiz {submission.quiz_id}, expected quiz {quiz.id}",
            )

    @staticmethod
    def _check_duplicates(submission: SubmitQuiz) -> None:
        seen: Set[int] = set()
        for response in submission.responses:
            if response.question_id in seen:
                raise SubmissionValidationException(
                    ValidationRule.DUPLICATE_QUESTION,
                    f"Question {response.question_id} is submitted more than once",
                    question_id=response.question_id,
                )
            seen.add(response.question_id)

    @staticmethod
    def _check_questions(quiz: QuizData, submission: SubmitQuiz) -> None:
        for response in submission.responses:
            if quiz.question_by_id(response.question_id) is None:
                raise SubmissionValidationException(
                    ValidationRule.UNKNOWN_QUESTION,
                    f"Question {response.question_id} does not belong to quiz {quiz.id}",
                    question_id=response.question_id,
                )

    @staticmethod
    def _check_answers(quiz: QuizData, submission: SubmitQuiz) -> None:
        for response in submission.responses:
            question = quiz.question_by_id(response.question_id)
            unknown = frozenset(response.selected_answer_ids) - question.answer_ids
            if unknown:
                raise SubmissionValidationException(
                    ValidationRule.UNKNOWN_ANSWER,
                    f"Answers {sorted(unknown)} do not belong to question {question.id}",
                    question_id=question.id,
                    answer_ids=unknown,
                )

    @staticmethod
    def _check_single_answer(quiz: QuizData, submission: SubmitQuiz) -> None:
        for response in submission.responses:
            question = quiz.question_by_id(response.question_id)
            if not question.allows_multiple_answers and len(response.selected_answer_ids) > 1:
                raise SubmissionValidationException(
                    ValidationRule.TOO_MANY_ANSWERS,
                    f"Question {question.id} accepts a single answer, "
                    f"{len(response.selected_answer_ids)} were selected",
                    question_id=question.id,
                    answer_ids=response.selected_answer_ids,
                )
