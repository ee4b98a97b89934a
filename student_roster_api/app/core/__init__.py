"""
Core infrastructure: settings, logging, the calendar date type and the
in-memory student store.
"""
