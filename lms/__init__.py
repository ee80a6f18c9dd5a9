"""
LMS Package - Learning Management Backend

This package contains the learning-management system: course structure,
quizzes with attempt submission and grading, references, course reviews
and lesson resources.

Structure:
- common/: Shared exceptions, exception handler and query filters
- courses/: Courses, course modules, lessons and objectives
- quiz/: Quizzes, grading core, attempt persistence and views
- references/: External references attached to modules or lessons
- reviews/: Course reviews written by learners
- lesson_resources/: Resource metadata attached to lessons

Author: LMS Development Team
Version: 1.0.0
"""
