"""
Movie Records API application package.

This package contains the request-validation pipeline, database access,
the FastAPI application, and utilities.
"""

__version__ = "1.0.0"
