"""
Infrastructure Layer
=====================

Low-level technical concerns shared by every slice:
- Logging setup
- Service registry (request-scoped dependency wiring)
"""
