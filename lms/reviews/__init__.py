"""
Course reviews written by learners.
"""
