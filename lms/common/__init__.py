"""
Common utilities shared by the LMS sub-packages.

Author: LMS Development Team
Version: 1.0.0
"""

from .exceptions import (
    LearningException,
    NotFoundException,
    SubmissionValidationException,
    InvalidQuizStateException,
    PersistenceFailureException,
    ValidationRule,
)

__all__ = [
    "LearningException",
    "NotFoundException",
    "SubmissionValidationException",
    "InvalidQuizStateException",
    "PersistenceFailureException",
    "ValidationRule",
]
