"""
LMS Django Admin Configuration

This module provides the Django admin interface configuration for all LMS
models.

The admin interface is organized into logical sections:
- Course Structure: Courses, modules, lessons and objectives
- Quiz System: Quiz authoring with inline questions, attempt inspection
- Course Material: References and lesson resources
- Feedback: Course reviews

Attempts and their responses are written by the submission service only, so
they are read-only here.

Author: LMS Development Team
Version: 1.0.0
"""

from typing import Optional
from django.contrib import admin
from django.db.models import QuerySet
from django.http import HttpRequest

from .models import (
    Course,
    CourseModule,
    Lesson,
    Objective,
    Quiz,
    Question,
    Answer,
    QuizAttempt,
    UserQuestionResponse,
    Reference,
    Review,
    LessonResource,
)

# --- Course Structure Administration ---


class CourseModuleInline(admin.TabularInline):
    """Inline admin for the modules of a course."""

    model = CourseModule
    extra = 0
    fields = ("title", "order")
    ordering = ("order",)


class ObjectiveInline(admin.TabularInline):
    model = Objective
    extra = 0
    fields = ("title", "description", "order")


@admin.register(Course)
class CourseAdmin(admin.ModelAdmin):
    list_display = ("title", "is_published", "created_at")
    list_filter = ("is_published",)
    search_fields = ("title", "description")
    inlines = [CourseModuleInline, ObjectiveInline]


class LessonInline(admin.TabularInline):
    model = Lesson
    extra = 0
    fields = ("title", "order")


@admin.register(CourseModule)
class CourseModuleAdmin(admin.ModelAdmin):
    list_display = ("title", "course", "order")
    list_filter = ("course",)
    search_fields = ("title", "course__title")
    inlines = [LessonInline]


@admin.register(Lesson)
class LessonAdmin(admin.ModelAdmin):
    list_display = ("title", "module", "order")
    list_filter = ("module__course",)
    search_fields = ("title", "module__title")


# --- Quiz System Administration ---


class QuestionInline(admin.StackedInline):
    """Inline admin for quiz questions."""

    model = Question
    extra = 0
    fields = ("text", "allows_multiple_answers", "order")
    show_change_link = True


class AnswerInline(admin.TabularInline):
    model = Answer
    extra = 0
    fields = ("text", "is_correct", "order")


@admin.register(Quiz)
class QuizAdmin(admin.ModelAdmin):
    """
    Administration interface for quizzes.

    Questions are edited inline; answers are edited on the question page.
    """

    list_display = ("title", "lesson", "pass_threshold", "question_count", "created_at")
    list_filter = ("lesson__module__course",)
    search_fields = ("title", "description")
    readonly_fields = ("created_at", "updated_at")
    inlines = [QuestionInline]


@admin.register(Question)
class QuestionAdmin(admin.ModelAdmin):
    list_display = ("__str__", "quiz", "allows_multiple_answers", "order")
    list_filter = ("allows_multiple_answers", "quiz")
    search_fields = ("text", "quiz__title")
    inlines = [AnswerInline]


class UserQuestionResponseInline(admin.TabularInline):
    """Read-only inline showing the per-question detail of an attempt."""

    model = UserQuestionResponse
    extra = 0
    fields = ("question", "selected_answer_ids", "is_correct")
    readonly_fields = fields
    can_delete = False

    def has_add_permission(self, request: HttpRequest, obj: Optional[QuizAttempt] = None) -> bool:
        return False


@admin.register(QuizAttempt)
class QuizAttemptAdmin(admin.ModelAdmin):
    """Read-only inspection of graded quiz attempts."""

    list_display = ("user", "quiz", "score", "passed", "attempt_count", "submitted_at")
    list_filter = ("passed", "quiz", "submitted_at")
    search_fields = ("user__username", "user__email", "quiz__title")
    readonly_fields = ("user", "quiz", "score", "passed", "attempt_count", "submitted_at")
    inlines = [UserQuestionResponseInline]

    def has_add_permission(self, request: HttpRequest) -> bool:
        return False

    def get_queryset(self, request: HttpRequest) -> QuerySet:
        return super().get_queryset(request).select_related("user", "quiz")


# --- Course Material Administration ---


@admin.register(Reference)
class ReferenceAdmin(admin.ModelAdmin):
    list_display = ("title", "url", "module", "lesson", "order")
    list_filter = ("module",)
    search_fields = ("title", "url")


@admin.register(LessonResource)
class LessonResourceAdmin(admin.ModelAdmin):
    list_display = ("title", "lesson", "resource_type", "download_count", "is_active", "created_at")
    list_filter = ("resource_type", "is_active")
    search_fields = ("title", "original_name", "filename")
    readonly_fields = ("download_count", "created_at", "updated_at")


# --- Feedback Administration ---


@admin.register(Review)
class ReviewAdmin(admin.ModelAdmin):
    list_display = ("user", "course", "rating", "created_at")
    list_filter = ("rating", "course")
    search_fields = ("user__username", "course__title", "comment")
