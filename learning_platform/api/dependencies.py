"""
Dependency injection for FastAPI endpoints.
"""

from datetime import datetime


def get_current_time() -> datetime:
    """FastAPI dependency for the current local wall-clock time.

    Returns a naive datetime in the host's local timezone. Tests replace
    this through ``app.dependency_overrides`` to pin the clock.
    """
    return datetime.now()
