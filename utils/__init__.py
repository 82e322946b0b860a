"""
Shared utilities: logging setup and randomness sources.
"""
