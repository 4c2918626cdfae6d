"""
Shared API Layer
================

Middleware, exception handlers and FastAPI dependencies common to all routers.
"""
