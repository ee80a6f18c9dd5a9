"""
LMS Application URL Configuration

This module defines the URL routing structure for the LMS application. Each
functional area (quizzes, references, reviews, lesson resources) has its own
URL namespace.

URL Structure:
- /api/lms/token/: Authentication endpoints (JWT token management)
- /api/lms/quizzes/: Quiz authoring, submission and attempt lookup
- /api/lms/references/: Reference management
- /api/lms/courses/<course_id>/reviews/: Course reviews
- /api/lms/lesson-resources/: Lesson resource metadata

Author: LMS Development Team
Version: 1.0.0
"""

from typing import List
from django.urls import path, include, URLPattern
from rest_framework_simplejwt.views import (
    TokenObtainPairView,
    TokenRefreshView,
    TokenVerifyView,
)

from .quiz import views as quiz_views
from .references import views as reference_views
from .reviews import views as review_views
from .lesson_resources import views as resource_views

app_name = 'lms'

# --- Quiz URL Patterns ---

quizzes_urlpatterns: List[URLPattern] = [
    path('', quiz_views.QuizListCreateView.as_view(), name='quiz-list'),
    path('<int:pk>/', quiz_views.QuizDetailView.as_view(), name='quiz-detail'),
    path('lesson/<int:lesson_id>/', quiz_views.QuizByLessonView.as_view(), name='quiz-by-lesson'),

    # Submission and attempt lookup
    path('submit/', quiz_views.SubmitQuizView.as_view(), name='quiz-submit'),
    path('attempt/<int:user_id>/<int:quiz_id>/', quiz_views.UserQuizAttemptView.as_view(), name='quiz-attempt'),
    path('passed/<int:user_id>/<int:quiz_id>/', quiz_views.UserPassedQuizView.as_view(), name='quiz-passed'),
]

# --- Reference URL Patterns ---

references_urlpatterns: List[URLPattern] = [
    path('', reference_views.ReferenceListCreateView.as_view(), name='reference-list'),
    path('<int:pk>/', reference_views.ReferenceDetailView.as_view(), name='reference-detail'),
    path('module/<int:module_id>/', reference_views.ReferenceByModuleView.as_view(), name='reference-by-module'),
    path('lesson/<int:lesson_id>/', reference_views.ReferenceByLessonView.as_view(), name='reference-by-lesson'),
]

# --- Review URL Patterns (nested under a course) ---

reviews_urlpatterns: List[URLPattern] = [
    path('', review_views.CourseReviewsView.as_view(), name='review-list'),
    path('me/', review_views.MyCourseReviewView.as_view(), name='review-me'),
    path('<int:pk>/', review_views.CourseReviewUpdateView.as_view(), name='review-update'),
]

# --- Lesson Resource URL Patterns ---

resources_urlpatterns: List[URLPattern] = [
    path('', resource_views.LessonResourceListCreateView.as_view(), name='resource-list'),
    path('<int:pk>/', resource_views.LessonResourceDetailView.as_view(), name='resource-detail'),
    path('<int:pk>/permanent/', resource_views.LessonResourcePermanentDeleteView.as_view(), name='resource-permanent-delete'),
    path('<int:pk>/download/', resource_views.LessonResourceDownloadView.as_view(), name='resource-download'),
    path('lesson/<int:lesson_id>/', resource_views.LessonResourceByLessonView.as_view(), name='resource-by-lesson'),
    path('type/<str:resource_type>/', resource_views.LessonResourceByTypeView.as_view(), name='resource-by-type'),
]

# --- Main URL Configuration for the LMS Application ---

urlpatterns: List[URLPattern] = [
    # Authentication endpoints (JWT token management)
    path('token/', TokenObtainPairView.as_view(), name='token_obtain_pair'),
    path('token/refresh/', TokenRefreshView.as_view(), name='token_refresh'),
    path('token/verify/', TokenVerifyView.as_view(), name='token_verify'),

    # Functional area URL includes with proper namespacing
    path('quizzes/', include((quizzes_urlpatterns, 'quizzes'))),
    path('references/', include((references_urlpatterns, 'references'))),
    path('courses/<int:course_id>/reviews/', include((reviews_urlpatterns, 'reviews'))),
    path('lesson-resources/', include((resources_urlpatterns, 'resources'))),
]
