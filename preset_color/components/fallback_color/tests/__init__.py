"""
Fallback-color component tests.
"""
