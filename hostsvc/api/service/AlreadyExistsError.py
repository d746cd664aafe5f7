"""Already-exists error for unit and socket files."""

from pathlib import Path

from .ServiceError import ServiceError


class AlreadyExistsError(ServiceError):
    """Raised when a service definition file is already present before install."""

    def __init__(self, kind: str, path: Path):
        self.kind = kind
        self.path = path
        super().__init__(f"{kind} already exists: {path}")
