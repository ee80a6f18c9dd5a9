"""
Quiz System Models

This module defines the persisted quiz aggregate and the attempt records the
submission service writes.

Models:
- Quiz: Graded assessment attached to a lesson
- Question: Single assessment item of a quiz
- Answer: Candidate option of a question, flagged correct or not
- QuizAttempt: A user's graded submission for a quiz (one row per user and quiz)
- UserQuestionResponse: Per-question detail of an attempt

Attempt Policy:
    Resubmitting a quiz overwrites the user's existing QuizAttempt and replaces
    all of its responses in one transaction. The (user, quiz) unique constraint
    backs the upsert performed by the attempt repository.

Author: LMS Development Team
Version: 1.0.0
"""

from django.conf import settings
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models
from django.utils.translation import gettext_lazy as _

from ..courses.models import Lesson


def default_pass_threshold() -> int:
    return settings.LMS_DEFAULT_PASS_THRESHOLD


class Quiz(models.Model):
    """
    Graded assessment composed of ordered questions.

    Attributes:
        lesson: Optional lesson the quiz belongs to
        title: Quiz title
        description: Optional instructions
        pass_threshold: Minimum score in percent required to pass

    Note:
        A quiz is treated as immutable once attempts reference it.
    """

    lesson = models.ForeignKey(
        Lesson,
        related_name="quizzes",
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        verbose_name=_("Lesson"),
    )

    title = models.CharField(max_length=255, verbose_name=_("Quiz Title"))

    description = models.TextField(blank=True, verbose_name=_("Description"))

    pass_threshold = models.PositiveSmallIntegerField(
        default=default_pass_threshold,
        validators=[MinValueValidator(0), MaxValueValidator(100)],
        verbose_name=_("Pass Threshold"),
        help_text=_("Minimum score in percent required to pass the quiz."),
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self) -> str:
        return self.title

    class Meta:
        verbose_name = _("Quiz")
        verbose_name_plural = _("Quizzes")
        ordering = ["-created_at"]

    @property
    def question_count(self) -> int:
        return self.questions.count()


class Question(models.Model):
    """Single assessment item with one or more candidate answers."""

    quiz = models.ForeignKey(
        Quiz,
        related_name="questions",
        on_delete=models.CASCADE,
        verbose_name=_("Quiz"),
    )

    text = models.TextField(verbose_name=_("Question Text"))

    allows_multiple_answers = models.BooleanField(
        default=False,
        verbose_name=_("Allows Multiple Answers"),
        help_text=_("Whether more than one answer may be selected."),
    )

    order = models.PositiveIntegerField(default=0, verbose_name=_("Display Order"))

    def __str__(self) -> str:
        return f"{self.quiz.title} - {self.text[:40]}"

    class Meta:
        verbose_name = _("Question")
        verbose_name_plural = _("Questions")
        ordering = ["quiz", "order", "id"]


class Answer(models.Model):
    """Candidate option for a question."""

    question = models.ForeignKey(
        Question,
        related_name="answers",
        on_delete=models.CASCADE,
        verbose_name=_("Question"),
    )

    text = models.CharField(max_length=500, verbose_name=_("Answer Text"))

    is_correct = models.BooleanField(default=False, verbose_name=_("Correct"))

    order = models.PositiveIntegerField(default=0, verbose_name=_("Display Order"))

    def __str__(self) -> str:
        return self.text

    class Meta:
        verbose_name = _("Answer")
        verbose_name_plural = _("Answers")
        ordering = ["question", "order", "id"]


class QuizAttempt(models.Model):
    """
    A user's graded submission for a quiz.

    Attributes:
        user: User who submitted
        quiz: Quiz that was submitted
        score: Integer percentage 0-100, always recomputable from the responses
        passed: Whether score reached the quiz pass threshold
        submitted_at: Timestamp of the latest submission
        attempt_count: Number of submissions folded into this row
    """

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        related_name="quiz_attempts",
        on_delete=models.CASCADE,
        verbose_name=_("User"),
    )

    quiz = models.ForeignKey(
        Quiz,
        related_name="attempts",
        on_delete=models.CASCADE,
        verbose_name=_("Quiz"),
    )

    score = models.PositiveSmallIntegerField(
        validators=[MinValueValidator(0), MaxValueValidator(100)],
        verbose_name=_("Score"),
    )

    passed = models.BooleanField(default=False, verbose_name=_("Passed"))

    submitted_at = models.DateTimeField(verbose_name=_("Submitted At"))

    attempt_count = models.PositiveIntegerField(
        default=1,
        verbose_name=_("Attempt Count"),
    )

    def __str__(self) -> str:
        return f"Attempt for {self.quiz.title} by {self.user.username}"

    class Meta:
        verbose_name = _("Quiz Attempt")
        verbose_name_plural = _("Quiz Attempts")
        ordering = ["-submitted_at"]
        constraints = [
            models.UniqueConstraint(
                fields=["user", "quiz"], name="unique_quiz_attempt_per_user"
            ),
        ]
        indexes = [
            models.Index(fields=["quiz", "passed"], name="lms_attempt_quiz_passed_idx"),
        ]


class UserQuestionResponse(models.Model):
    """Answers a user selected for one question of an attempt."""

    attempt = models.ForeignKey(
        QuizAttempt,
        related_name="responses",
        on_delete=models.CASCADE,
        verbose_name=_("Attempt"),
    )

    question = models.ForeignKey(
        Question,
        related_name="user_responses",
        on_delete=models.CASCADE,
        verbose_name=_("Question"),
    )

    # sorted list of Answer ids; empty for an unanswered question
    selected_answer_ids = models.JSONField(
        default=list,
        blank=True,
        verbose_name=_("Selected Answers"),
    )

    is_correct = models.BooleanField(default=False, verbose_name=_("Correct"))

    def __str__(self) -> str:
        status = _("Correct") if self.is_correct else _("Incorrect")
        return f"{self.attempt} - Question {self.question_id} ({status})"

    class Meta:
        verbose_name = _("User Question Response")
        verbose_name_plural = _("User Question Responses")
        ordering = ["attempt", "question__order", "question_id"]
        constraints = [
            models.UniqueConstraint(
                fields=["attempt", "question"], name="unique_response_per_question"
            ),
        ]
