"""
Smart Meter Price Plan API.
"""
