"""
Quiz Services Package

Author: LMS Development Team
Version: 1.0.0
"""

from .submission_service import QuizSubmissionService

__all__ = ["QuizSubmissionService"]
