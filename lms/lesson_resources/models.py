"""
Lesson Resource Models

Author: LMS Development Team
Version: 1.0.0
"""

from django.db import models
from django.db.models import F
from django.utils.translation import gettext_lazy as _

from ..courses.models import Lesson


class LessonResource(models.Model):
    """
    Metadata of a file attached to a lesson.

    Resources are soft deleted by clearing ``is_active``; inactive resources
    are invisible to every endpoint except permanent deletion.
    """

    class ResourceType(models.TextChoices):
        IMAGE = "image", _("Image")
        VIDEO = "video", _("Video")
        AUDIO = "audio", _("Audio")
        DOCUMENT = "document", _("Document")
        ARCHIVE = "archive", _("Archive")
        OTHER = "other", _("Other")

    lesson = models.ForeignKey(
        Lesson,
        related_name="resources",
        on_delete=models.CASCADE,
        verbose_name=_("Lesson"),
    )

    title = models.CharField(max_length=255, verbose_name=_("Title"))

    description = models.TextField(blank=True, null=True, verbose_name=_("Description"))

    filename = models.CharField(max_length=255, verbose_name=_("Stored Filename"))

    original_name = models.CharField(max_length=255, verbose_name=_("Original Filename"))

    mimetype = models.CharField(max_length=255, verbose_name=_("MIME Type"))

    size = models.PositiveBigIntegerField(default=0, verbose_name=_("Size (bytes)"))

    file_url = models.URLField(max_length=1000, verbose_name=_("File URL"))

    resource_type = models.CharField(
        max_length=20,
        choices=ResourceType.choices,
        default=ResourceType.OTHER,
        verbose_name=_("Resource Type"),
    )

    download_count = models.PositiveIntegerField(default=0, verbose_name=_("Downloads"))

    is_active = models.BooleanField(default=True, verbose_name=_("Active"))

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self) -> str:
        return f"{self.title} ({self.resource_type})"

    class Meta:
        verbose_name = _("Lesson Resource")
        verbose_name_plural = _("Lesson Resources")
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["lesson", "is_active"], name="lms_resource_lesson_idx"),
            models.Index(fields=["resource_type", "is_active"], name="lms_resource_type_idx"),
        ]

    @classmethod
    def resource_type_for_mimetype(cls, mimetype: str) -> str:
        """Classify a MIME type into a ResourceType."""
        mimetype = (mimetype or "").lower()
        if mimetype.startswith("image/"):
            return cls.ResourceType.IMAGE
        if mimetype.startswith("video/"):
            return cls.ResourceType.VIDEO
        if mimetype.startswith("audio/"):
            return cls.ResourceType.AUDIO
        if any(
            marker in mimetype
            for marker in ("pdf", "document", "text", "spreadsheet", "presentation")
        ):
            return cls.ResourceType.DOCUMENT
        if "zip" in mimetype or "rar" in mimetype:
            return cls.ResourceType.ARCHIVE
        return cls.ResourceType.OTHER

    def increment_download_count(self) -> None:
        """Atomically bump the download counter."""
        LessonResource.objects.filter(pk=self.pk).update(
            download_count=F("download_count") + 1
        )
        self.refresh_from_db(fields=["download_count"])
