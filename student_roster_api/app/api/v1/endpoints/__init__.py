"""
Endpoint subpackage for API v1.

Each module defines an ``APIRouter`` for one resource; they are
aggregated in ``router.py`` and mounted by the application.
"""
