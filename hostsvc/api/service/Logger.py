"""Logger interface handed to programs running as services."""

from typing import Protocol


class Logger(Protocol):
    """Minimal leveled logger; arguments are %-formatted into ``msg``."""

    def error(self, msg: str, *args) -> None: ...

    def warning(self, msg: str, *args) -> None: ...

    def info(self, msg: str, *args) -> None: ...
