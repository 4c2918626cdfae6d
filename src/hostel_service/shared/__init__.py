"""
Shared Kernel Module
====================

Shared infrastructure used across all vertical slices (hostels, rooms,
hostel students).

DO NOT add business logic from any slice to the shared kernel.
"""
