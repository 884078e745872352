"""
Service-layer exceptions for consistent error handling.
"""


class ServiceError(Exception):
    """Base exception for all service-related errors."""
    pass
