"""Unsupported configuration error."""

from .ServiceError import ServiceError


class UnsupportedConfigError(ServiceError):
    """Raised when the descriptor asks for something this backend cannot do."""
