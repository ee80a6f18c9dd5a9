"""
Course structure: courses, modules, lessons and objectives.
"""
