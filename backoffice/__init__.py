"""
Backoffice - order lifecycle, delivery routing and dashboard statistics service.
"""

__version__ = "1.0.0"
