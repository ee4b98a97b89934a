"""
Top-level package for the Student Roster API.

All functionality lives in submodules under ``app``; import the ASGI
application as ``student_roster_api.app.main:app``.
"""

__all__ = []
