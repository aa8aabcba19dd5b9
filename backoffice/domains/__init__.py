"""
Business domains of the backoffice service.
"""
