"""
LMS Application Models Registry

This module serves as the central models registry for the LMS application.
It imports and exposes all models from the logical submodules so that they are
registered with Django's ORM under a single app label.

Architecture:
- courses/: Course structure models
- quiz/: Quiz, question, answer and attempt models
- references/: Reference models
- reviews/: Course review models
- lesson_resources/: Lesson resource models

Author: LMS Development Team
Version: 1.0.0
"""

from .courses.models import *

from .quiz.models import *

from .references.models import *

from .reviews.models import *

from .lesson_resources.models import *
