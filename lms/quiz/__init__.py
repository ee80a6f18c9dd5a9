"""
Quiz system: quizzes, grading core, attempt persistence and API views.
"""
