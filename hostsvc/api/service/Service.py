"""Service public API - installs and controls a program as a system service."""

import importlib
import queue
from pathlib import Path
from typing import Any

from ._backend_registry import _BACKEND_REGISTRY
from ._AbstractImpl import _AbstractImpl
from .Logger import Logger
from .Program import Program
from .ServiceConfig import ServiceConfig
from .ServiceStatus import ServiceStatus


class Service:
    """Public API for service operations.

    The backend is selected once, when the context is entered, and every
    call is forwarded to it::

        with Service(config, program) as service:
            service.install()
    """

    def __init__(self, config: ServiceConfig, program: Program | None = None, platform: str | None = None):
        self.config = config
        self.program = program
        self.platform = platform
        self._impl: _AbstractImpl | None = None

    @staticmethod
    def detect_platform() -> str:
        """Detect the init system of the running host.

        Returns:
            Backend identifier (e.g., "systemd")

        Raises:
            RuntimeError: If no supported init system is detected
        """
        for name, (_module, run_dir) in _BACKEND_REGISTRY.items():
            if Path(run_dir).exists():
                return name
        raise RuntimeError(f"Unsupported init system (supported: {list(_BACKEND_REGISTRY.keys())})")

    def __enter__(self):
        backend_type = self.platform or self.detect_platform()
        if backend_type not in _BACKEND_REGISTRY:
            raise ValueError(f"Unsupported backend type: {backend_type!r} (supported: {list(_BACKEND_REGISTRY.keys())})")

        module_name, _run_dir = _BACKEND_REGISTRY[backend_type]
        module = importlib.import_module(f"hostsvc.api.service.{module_name}._Impl")
        self.platform = backend_type
        self._impl = module._Impl(self.config, self.program)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        # Backends hold no resources between calls
        return False

    def __str__(self) -> str:
        return str(self.config)

    def _require_impl(self) -> _AbstractImpl:
        if not self._impl:
            raise RuntimeError("Service not initialized. Use as context manager first.")
        return self._impl

    def unit_path(self) -> Path:
        return self._require_impl().unit_path()

    def install(self) -> None:
        self._require_impl().install()

    def uninstall(self) -> None:
        self._require_impl().uninstall()

    def start(self) -> None:
        self._require_impl().start()

    def stop(self) -> None:
        self._require_impl().stop()

    def restart(self) -> None:
        self._require_impl().restart()

    def status(self) -> ServiceStatus:
        return self._require_impl().status()

    def run(self) -> Any:
        """Run the program: start hook, wait for SIGINT/SIGTERM, stop hook."""
        return self._require_impl().run()

    def logger(self, errors: "queue.Queue[BaseException] | None" = None) -> Logger:
        return self._require_impl().logger(errors)

    def system_logger(self, errors: "queue.Queue[BaseException] | None" = None) -> Logger:
        return self._require_impl().system_logger(errors)
