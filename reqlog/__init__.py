"""Conditional HTTP request logging for FastAPI apps."""

__version__ = "0.1.0"
