"""
Grading Engine

Computes per-question correctness and the aggregate score of a validated
submission.

Rules:
- Every quiz question is graded, answered or not.
- A question is correct iff the selected answer set equals the correct answer
  set exactly. Subsets and supersets earn nothing.
- Score = correct / total * 100, rounded half-up to an integer percent.
- passed = score >= quiz.pass_threshold
- A quiz with no questions, or with a question that has no correct answer,
  cannot be graded.

Author: LMS Development Team
Version: 1.0.0
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable

from ...common.exceptions import InvalidQuizStateException
from .types import GradedQuestion, GradedResult, QuizData, ValidatedSubmission


def calculate_score(correct_count: int, total_count: int) -> int:
    """Integer percentage of ``correct_count`` out of ``total_count``, rounded half-up."""
    if total_count <= 0:
        raise ValueError("total_count must be positive")
    percentage = Decimal(correct_count) * 100 / Decimal(total_count)
    return int(percentage.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


class GradingEngine:
    """
    Grades validated submissions.

    Pure and stateless: it reads the quiz data it is given and never
    modifies it.
    """

    def grade(self, quiz: QuizData, submission: ValidatedSubmission) -> GradedResult:
        """
        Grade ``submission`` against ``quiz``.

        Args:
            quiz: Quiz aggregate the submission was validated against
            submission: Validated submission

        Returns:
            GradedResult with one GradedQuestion per quiz question, in quiz order

        Raises:
            InvalidQuizStateException: If the quiz has no questions, or a question
                has no correct answer
        """
        if not quiz.questions:
            raise InvalidQuizStateException(quiz.id)
        for question in quiz.questions:
            if not question.correct_answer_ids:
                raise InvalidQuizStateException(
                    quiz.id,
                    f"Question {question.id} of quiz {quiz.id} has no correct answer "
                    f"and cannot be graded",
                )

        graded = []
        for question in quiz.questions:
            selected = frozenset(submission.selected_for(question.id))
            graded.append(
                GradedQuestion(
                    question_id=question.id,
                    selected_answer_ids=selected,
                    is_correct=selected == question.correct_answer_ids,
                )
            )

        score = self.score_responses(graded)
        return GradedResult(
            quiz_id=quiz.id,
            score=score,
            passed=score >= quiz.pass_threshold,
            questions=tuple(graded),
        )

    @staticmethod
    def score_responses(responses: Iterable[GradedQuestion]) -> int:
        """
        Score a complete set of graded responses.

        Used both while grading and to recompute the score of a persisted
        attempt from its response rows.
        """
        responses = list(responses)
        correct = sum(1 for response in responses if response.is_correct)
        return calculate_score(correct, len(responses))
