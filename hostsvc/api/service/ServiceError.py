"""Base exception for service adapter failures."""


class ServiceError(Exception):
    """Raised when a service cannot be installed or controlled."""
