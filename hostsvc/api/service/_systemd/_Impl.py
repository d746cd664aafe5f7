"""systemd service implementation - installs a program as a system-wide unit."""

import queue
from pathlib import Path
from typing import Any

from ....logging_config import get_logger
from .._AbstractImpl import _AbstractImpl
from .._is_interactive import is_interactive
from .._run_command import run_command
from .._wait_for_termination import wait_for_termination
from ..AlreadyExistsError import AlreadyExistsError
from ..CommandError import CommandError
from ..ConsoleLogger import CONSOLE_LOGGER
from ..Logger import Logger
from ..ServiceStatus import ServiceStatus
from ..SystemLogger import SystemLogger
from ..UnsupportedConfigError import UnsupportedConfigError
from ._render_unit import render_service_unit, render_socket_unit

logger = get_logger("service.systemd")

SYSTEMCTL = "systemctl"

# Fixed message; user units would live under ~/.config/systemd/user instead
USER_SERVICE_UNSUPPORTED = "User services are not supported on systemd."


class _Impl(_AbstractImpl):
    """systemd implementation driving ``systemctl`` against /etc/systemd/system."""

    UNIT_DIR = Path("/etc/systemd/system")

    @property
    def platform(self) -> str:
        return "systemd"

    @property
    def unit_name(self) -> str:
        return f"{self.config.name}.service"

    def unit_path(self) -> Path:
        """Path of the service unit file.

        Raises:
            UnsupportedConfigError: If a user-scope service was requested
        """
        if self.config.options.user_service:
            raise UnsupportedConfigError(USER_SERVICE_UNSUPPORTED)
        return self.UNIT_DIR / self.unit_name

    def socket_path(self) -> Path:
        """Path of the socket unit file."""
        return self.UNIT_DIR / f"{self.config.name}.socket"

    def install(self) -> None:
        """Write the unit file(s), enable the unit and reload systemd.

        Stops at the first failure. Files written before the failure are left
        in place; call ``uninstall()`` to clean up a partial install.
        """
        unit_path = self.unit_path()
        if unit_path.exists():
            raise AlreadyExistsError("Unit file", unit_path)

        with unit_path.open("w", encoding="utf-8") as fh:
            fh.write(render_service_unit(self.config, self.config.exec_path()))
        logger.info("Created unit file: %s", unit_path)

        if self.config.with_socket:
            socket_path = self.socket_path()
            if socket_path.exists():
                raise AlreadyExistsError("Socket file", socket_path)
            with socket_path.open("w", encoding="utf-8") as fh:
                fh.write(render_socket_unit(self.config))
            logger.info("Created socket file: %s", socket_path)

        run_command(SYSTEMCTL, "enable", self.unit_name)
        run_command(SYSTEMCTL, "daemon-reload")
        logger.info("Service '%s' installed and enabled", self.config.name)

    def uninstall(self) -> None:
        """Disable the unit, then remove the unit file and the socket file.

        The socket file is removed even when none was installed, so a
        service installed without socket activation raises
        FileNotFoundError at that last step.
        """
        run_command(SYSTEMCTL, "disable", self.unit_name)
        unit_path = self.unit_path()
        unit_path.unlink()
        logger.info("Removed unit file: %s", unit_path)
        socket_path = self.socket_path()
        socket_path.unlink()
        logger.info("Removed socket file: %s", socket_path)

    def start(self) -> None:
        run_command(SYSTEMCTL, "start", self.unit_name)
        logger.info("Service '%s' started", self.config.name)

    def stop(self) -> None:
        run_command(SYSTEMCTL, "stop", self.unit_name)
        logger.info("Service '%s' stopped", self.config.name)

    def restart(self) -> None:
        run_command(SYSTEMCTL, "restart", self.unit_name)
        logger.info("Service '%s' restarted", self.config.name)

    def status(self) -> ServiceStatus:
        if not self.unit_path().exists():
            return ServiceStatus.NOT_INSTALLED
        try:
            run_command(SYSTEMCTL, "is-active", self.unit_name)
        except CommandError as e:
            # No exit status means systemctl itself could not be run
            if e.returncode is None:
                raise
            return ServiceStatus.STOPPED
        return ServiceStatus.RUNNING

    def run(self) -> Any:
        if self.program is None:
            raise RuntimeError("No program given; pass one to Service() to use run()")
        self.program.start(self)
        if self.config.options.run_wait:
            wait_for_termination()
        return self.program.stop(self)

    def logger(self, errors: "queue.Queue[BaseException] | None" = None) -> Logger:
        if is_interactive():
            return CONSOLE_LOGGER
        return self.system_logger(errors)

    def system_logger(self, errors: "queue.Queue[BaseException] | None" = None) -> Logger:
        return SystemLogger(self.config.name, errors)
