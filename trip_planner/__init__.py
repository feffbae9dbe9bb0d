"""
Trip planner backend: catalog, trip aggregates and the booking wizard.
"""

__version__ = "1.0.0"
