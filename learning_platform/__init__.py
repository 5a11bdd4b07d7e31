"""
Backend for the learning platform.

Serves a small HTTP API consumed by the separately built frontend.
"""

__version__ = "0.1.0"
