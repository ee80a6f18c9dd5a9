"""
Lesson resources: metadata of downloadable material attached to lessons.
The files themselves live in external storage and are referenced by URL.
"""
