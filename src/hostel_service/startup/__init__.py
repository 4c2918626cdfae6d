"""
Startup Module
==============

Build-phase wiring that runs before the server accepts connections:
- Service registration for every slice
- Startup migration policy and retry loop
"""

from hostel_service.startup.migrations import (
    BACKOFF_CAP_SECONDS,
    MAX_ATTEMPTS,
    MigrationOrchestrator,
    MigrationOutcome,
    MigrationPolicy,
    MigrationResult,
    backoff_delay,
    parse_override,
)
from hostel_service.startup.services import SERVICE_CONTRACTS, build_registry, register_services

__all__ = [
    "BACKOFF_CAP_SECONDS",
    "MAX_ATTEMPTS",
    "MigrationOrchestrator",
    "MigrationOutcome",
    "MigrationPolicy",
    "MigrationResult",
    "backoff_delay",
    "parse_override",
    "SERVICE_CONTRACTS",
    "build_registry",
    "register_services",
]
