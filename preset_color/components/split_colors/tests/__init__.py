"""
Split-colors component tests.
"""
