"""
DRF exception handler rendering LMS domain exceptions.

Author: LMS Development Team
Version: 1.0.0
"""

import logging
from typing import Any, Dict, Optional

from rest_framework.response import Response
from rest_framework.views import exception_handler

from .exceptions import LearningException

logger = logging.getLogger(__name__)


def learning_exception_handler(exc: Exception, context: Dict[str, Any]) -> Optional[Response]:
    """
    Render LearningException subclasses as JSON with their own status code.

    Everything else is delegated to DRF's default handler, which returns None
    for unhandled exceptions so they propagate as server errors.
    """
    if not isinstance(exc, LearningException):
        return exception_handler(exc, context)

    view = context.get("view")
    view_name = view.__class__.__name__ if view is not None else "unknown"

    if exc.status_code >= 500:
        logger.error(f"{view_name}: {exc.__class__.__name__}: {exc.message}", exc_info=exc)
    else:
        logger.warning(f"{view_name}: {exc.__class__.__name__}: {exc.message}")

    return Response(exc.to_dict(), status=exc.status_code)
