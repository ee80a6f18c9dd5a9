"""
Course Review Models

Author: LMS Development Team
Version: 1.0.0
"""

from django.conf import settings
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models
from django.utils.translation import gettext_lazy as _

from ..courses.models import Course


class Review(models.Model):
    """A learner's rating and comment for a course. One review per user and course."""

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        related_name="course_reviews",
        on_delete=models.CASCADE,
        verbose_name=_("User"),
    )

    course = models.ForeignKey(
        Course,
        related_name="reviews",
        on_delete=models.CASCADE,
        verbose_name=_("Course"),
    )

    rating = models.PositiveSmallIntegerField(
        validators=[MinValueValidator(1), MaxValueValidator(5)],
        verbose_name=_("Rating"),
        help_text=_("Rating from 1 (poor) to 5 (excellent)."),
    )

    comment = models.TextField(blank=True, verbose_name=_("Comment"))

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self) -> str:
        return f"{self.user.username} - {self.course.title}: {self.rating}/5"

    class Meta:
        verbose_name = _("Review")
        verbose_name_plural = _("Reviews")
        unique_together = ("user", "course")
        ordering = ["-created_at"]
