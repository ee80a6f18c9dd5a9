"""
LMS Custom Exceptions

This module provides the exception classes raised by the LMS services. They
follow a hierarchical structure so that callers can handle a whole family of
errors at once, and each carries the HTTP status it maps to so the API layer
can render it without a lookup table.

Hierarchy:
- LearningException
  - NotFoundException (404)
  - SubmissionValidationException (400)
  - InvalidQuizStateException (500)
  - PersistenceFailureException (500)

Author: LMS Development Team
Version: 1.0.0
"""

from enum import Enum
from typing import Any, Dict, Iterable, Optional


class LearningException(Exception):
    """
    Base exception class for all LMS domain errors.

    Attributes:
        message (str): Human-readable error message
        status_code (int): HTTP status code the error maps to
        error_code (Optional[str]): Machine readable error identifier
        details (Dict[str, Any]): Additional error details

    Example:
        >>> try:
        ...     service.submit_quiz(submission)
        ... except LearningException as e:
        ...     logger.error(f"Quiz submission failed: {e.message}")
    """

    status_code: int = 500
    error_code: Optional[str] = None

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        """
        Initialize an LMS exception.

        Args:
            message: Human-readable error description
            status_code: HTTP status code (defaults to the class value)
            error_code: Machine readable identifier (defaults to the class value)
            details: Additional context or error details
        """
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        if error_code is not None:
            self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert exception to dictionary for serialization.

        Returns:
            Dictionary representation of the exception
        """
        return {
            "message": self.message,
            "status_code": self.status_code,
            "error_code": self.error_code,
            "details": self.details,
            "exception_type": self.__class__.__name__,
        }


class NotFoundException(LearningException):
    """
    Exception raised when a referenced resource does not exist.

    Attributes:
        resource (str): Kind of resource that was looked up
        resource_id (Any): Identifier that was not found
    """

    status_code = 404
    error_code = "NotFound"

    def __init__(self, resource: str, resource_id: Any) -> None:
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(
            message=f"{resource} with ID {resource_id} not found",
            details={"resource": resource, "id": resource_id},
        )


class ValidationRule(str, Enum):
    """Structural rules a quiz submission is checked against, in order."""

    QUIZ_MISMATCH = "quiz_mismatch"
    DUPLICATE_QUESTION = "duplicate_question"
    UNKNOWN_QUESTION = "unknown_question"
    UNKNOWN_ANSWER = "unknown_answer"
    TOO_MANY_ANSWERS = "too_many_answers"


class SubmissionValidationException(LearningException):
    """
    Exception raised when a quiz submission is structurally invalid.

    The submission is rejected as a whole, never corrected. The violated rule
    and the offending ids are exposed so the caller can show an actionable
    message.

    Attributes:
        rule (ValidationRule): The rule that was violated
        question_id (Optional[int]): Offending question id
        answer_ids (list): Offending answer ids, if any
    """

    status_code = 400
    error_code = "InvalidSubmission"

    def __init__(
        self,
        rule: ValidationRule,
        message: str,
        question_id: Optional[int] = None,
        answer_ids: Optional[Iterable[int]] = None,
    ) -> None:
        self.rule = rule
        self.question_id = question_id
        self.answer_ids = sorted(answer_ids) if answer_ids else []
        super().__init__(
            message=message,
            details={
                "rule": rule.value,
                "question_id": question_id,
                "answer_ids": self.answer_ids,
            },
        )


class InvalidQuizStateException(LearningException):
    """
    Exception raised when a quiz cannot be graded because its stored data is
    inconsistent, e.g. it has no questions. This is a server-side data fault.
    """

    status_code = 500
    error_code = "InvalidQuizState"

    def __init__(self, quiz_id: Any, message: Optional[str] = None) -> None:
        self.quiz_id = quiz_id
        super().__init__(
            message=message or f"Quiz {quiz_id} has no questions and cannot be graded",
            details={"quiz_id": quiz_id},
        )


class PersistenceFailureException(LearningException):
    """
    Exception raised when the atomic attempt save fails.

    No partial state is left behind, so the whole submission is safe to retry.
    """

    status_code = 500
    error_code = "PersistenceFailure"

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message=message, details=details)
