"""
Preset component tests.
"""
