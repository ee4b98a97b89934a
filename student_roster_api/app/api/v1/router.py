"""
Top-level router for version 1 of the API.

Resource routers are included here under their prefixes.  New
resources should be added to this file.
"""

from fastapi import APIRouter

from .endpoints import students

router = APIRouter()

router.include_router(students.router, prefix="/students", tags=["students"])
