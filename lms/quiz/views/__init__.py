"""
Quiz Views Package

Features:
- Quiz authoring (staff) and browsing
- Quiz submission with immediate grading
- Attempt lookup and pass status per user

Author: LMS Development Team
Version: 1.0.0
"""

from .quiz_views import *
from .attempt_views import *
