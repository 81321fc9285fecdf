"""Session Roster package.

In-memory registry of persons, tags and sessions with per-session
attendance and payroll. Organized by feature modules (persons, sessions,
registry, payroll, ...) with a thin Flask controller layer on top.
"""
