"""
Hostel Service
==============

Hostel management API: hostels, rooms and student allocations.
"""

__version__ = "1.0.0"
