"""Abstract base class for service implementations (platform service adapters)."""

import queue
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

from .Logger import Logger
from .Program import Program
from .ServiceConfig import ServiceConfig
from .ServiceStatus import ServiceStatus


class _AbstractImpl(ABC):
    """Abstract base class for platform-specific service implementations.

    One subclass exists per init system. The backend is chosen once by
    ``Service`` and every call goes straight to it.
    """

    def __init__(self, config: ServiceConfig, program: Program | None = None):
        self.config = config
        self.program = program

    def __str__(self) -> str:
        return str(self.config)

    @property
    @abstractmethod
    def platform(self) -> str:
        """Name of the init system this backend drives (e.g. 'systemd')."""
        pass

    @abstractmethod
    def unit_path(self) -> Path:
        """Path of the service definition file."""
        pass

    @abstractmethod
    def install(self) -> None:
        """Write the service definition and register it with the service manager."""
        pass

    @abstractmethod
    def uninstall(self) -> None:
        """Unregister the service and remove its definition files."""
        pass

    @abstractmethod
    def start(self) -> None:
        """Start the installed service via the service manager."""
        pass

    @abstractmethod
    def stop(self) -> None:
        """Stop the running service via the service manager."""
        pass

    @abstractmethod
    def restart(self) -> None:
        """Restart the service via the service manager."""
        pass

    @abstractmethod
    def status(self) -> ServiceStatus:
        """Query the live service state."""
        pass

    @abstractmethod
    def run(self) -> Any:
        """Run the program under supervision.

        Calls ``program.start``, waits for termination, then returns the
        result of ``program.stop``.
        """
        pass

    @abstractmethod
    def logger(self, errors: "queue.Queue[BaseException] | None" = None) -> Logger:
        """Console logger when interactive, system logger otherwise."""
        pass

    @abstractmethod
    def system_logger(self, errors: "queue.Queue[BaseException] | None" = None) -> Logger:
        """Logger that writes to the system log facility."""
        pass
