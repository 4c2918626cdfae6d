"""
Infrastructure Layer
=====================

Process-wide technical concerns:
- Database engine, sessions and Alembic migrations (``migrations/``)
"""
