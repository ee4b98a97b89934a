"""
Version 1 of the Student Roster API.

Breaking changes to request or response shapes belong in a new version
subpackage (e.g. ``v2``) so existing clients keep working.
"""
