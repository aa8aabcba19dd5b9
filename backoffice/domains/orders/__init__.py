"""
Orders domain: order lifecycle, delivery-route assignment, reviews and dashboard statistics.
"""
