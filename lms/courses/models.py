"""
Course Structure Models

This module defines the course hierarchy that the rest of the LMS hangs off:
quizzes and lesson resources belong to lessons, references to modules or
lessons, and reviews and objectives to courses.

Models:
- Course: Top-level learning offering
- CourseModule: Ordered section of a course
- Lesson: Ordered unit within a module
- Objective: Learning objective of a course

Author: LMS Development Team
Version: 1.0.0
"""

from django.db import models
from django.utils.translation import gettext_lazy as _


class Course(models.Model):
    """
    Top-level learning offering composed of modules.

    Attributes:
        title: Unique course title
        description: Optional course description
        is_published: Whether the course is visible to learners
    """

    title = models.CharField(
        max_length=255,
        unique=True,
        verbose_name=_("Course Title"),
    )

    description = models.TextField(
        blank=True,
        verbose_name=_("Description"),
    )

    is_published = models.BooleanField(
        default=False,
        verbose_name=_("Published"),
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self) -> str:
        return self.title

    class Meta:
        verbose_name = _("Course")
        verbose_name_plural = _("Courses")
        ordering = ["title"]


class CourseModule(models.Model):
    """Ordered section of a course."""

    course = models.ForeignKey(
        Course,
        related_name="modules",
        on_delete=models.CASCADE,
        verbose_name=_("Course"),
    )

    title = models.CharField(max_length=255, verbose_name=_("Module Title"))

    order = models.PositiveIntegerField(
        default=0,
        verbose_name=_("Display Order"),
    )

    def __str__(self) -> str:
        return f"{self.course.title} - {self.title}"

    class Meta:
        verbose_name = _("Course Module")
        verbose_name_plural = _("Course Modules")
        unique_together = ("course", "title")
        ordering = ["course", "order", "title"]


class Lesson(models.Model):
    """Ordered unit within a course module."""

    module = models.ForeignKey(
        CourseModule,
        related_name="lessons",
        on_delete=models.CASCADE,
        verbose_name=_("Module"),
    )

    title = models.CharField(max_length=255, verbose_name=_("Lesson Title"))

    order = models.PositiveIntegerField(
        default=0,
        verbose_name=_("Display Order"),
    )

    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self) -> str:
        return f"{self.module.title} - {self.title}"

    class Meta:
        verbose_name = _("Lesson")
        verbose_name_plural = _("Lessons")
        ordering = ["module", "order", "title"]


class Objective(models.Model):
    """Learning objective a course sets out to achieve."""

    course = models.ForeignKey(
        Course,
        related_name="objectives",
        on_delete=models.CASCADE,
        verbose_name=_("Course"),
    )

    title = models.CharField(max_length=255, verbose_name=_("Objective"))

    description = models.TextField(blank=True, null=True)

    order = models.PositiveIntegerField(default=0)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self) -> str:
        return self.title

    class Meta:
        verbose_name = _("Objective")
        verbose_name_plural = _("Objectives")
        ordering = ["course", "order"]
