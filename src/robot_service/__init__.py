"""
Robot Service GraphQL

FastAPI + Strawberry GraphQL service for robot management.
"""

__version__ = "1.0.0"
