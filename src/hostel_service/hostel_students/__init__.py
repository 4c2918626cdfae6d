"""
Hostel Students Module
======================

Vertical slice for allocating students to rooms and vacating them.
"""
