"""
Application package for the Student Roster API.

``core`` holds configuration, logging, the calendar date type and the
in-memory store; ``services`` the birthday logic and roster
operations; ``schemas`` the JSON models; ``api`` the versioned routers.
"""

from .main import app  # noqa: F401
