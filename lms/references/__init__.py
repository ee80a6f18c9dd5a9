"""
References: external reading material attached to course modules or lessons.
"""
