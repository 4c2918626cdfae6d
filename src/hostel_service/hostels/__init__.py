"""
Hostels Module
==============

Vertical slice for hostel buildings: create, list, update and delete hostels.
"""
