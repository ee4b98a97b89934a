"""
Service layer.

``birthday_service`` holds the pure date derivations (age, birth month,
upcoming birthdays); ``student_service`` combines them with the
in-memory store for the API handlers.
"""
