"""
Reference Models

External reading material (articles, documentation, videos) linked from a
course module, a lesson, or both.

Author: LMS Development Team
Version: 1.0.0
"""

from django.db import models
from django.utils.translation import gettext_lazy as _

from ..courses.models import CourseModule, Lesson


class Reference(models.Model):
    """
    Link to external material.

    Attributes:
        title: Display title
        url: Target URL
        description: Optional summary
        module: Optional course module the reference belongs to
        lesson: Optional lesson the reference belongs to
        order: Display order
    """

    title = models.CharField(max_length=255, verbose_name=_("Title"))

    url = models.URLField(max_length=1000, verbose_name=_("URL"))

    description = models.TextField(blank=True, verbose_name=_("Description"))

    module = models.ForeignKey(
        CourseModule,
        related_name="references",
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        verbose_name=_("Module"),
    )

    lesson = models.ForeignKey(
        Lesson,
        related_name="references",
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        verbose_name=_("Lesson"),
    )

    order = models.PositiveIntegerField(default=0, verbose_name=_("Display Order"))

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self) -> str:
        return self.title

    class Meta:
        verbose_name = _("Reference")
        verbose_name_plural = _("References")
        ordering = ["order", "title"]
