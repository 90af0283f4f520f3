"""
Contrast component tests.
"""
