"""
Core package - shared infrastructure for the backoffice service.
"""
