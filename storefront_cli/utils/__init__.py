"""
Shared helpers for formatting and structured logging.
"""
