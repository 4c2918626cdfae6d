"""
Rooms Module
============

Vertical slice for the rooms inside each hostel.
"""
