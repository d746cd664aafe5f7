"""Service module - service installation and control."""

from .AlreadyExistsError import AlreadyExistsError
from .CommandError import CommandError
from .Program import Program
from .Service import Service
from .ServiceConfig import ServiceConfig
from .ServiceError import ServiceError
from .ServiceOptions import ServiceOptions
from .ServiceOutputs import (
    ServiceInstallOutput,
    ServiceRestartOutput,
    ServiceStartOutput,
    ServiceStatusOutput,
    ServiceStopOutput,
    ServiceUninstallOutput,
)
from .ServiceStatus import ServiceStatus
from .UnsupportedConfigError import UnsupportedConfigError

__all__ = [
    "AlreadyExistsError",
    "CommandError",
    "Program",
    "Service",
    "ServiceConfig",
    "ServiceError",
    "ServiceInstallOutput",
    "ServiceOptions",
    "ServiceRestartOutput",
    "ServiceStartOutput",
    "ServiceStatus",
    "ServiceStatusOutput",
    "ServiceStopOutput",
    "ServiceUninstallOutput",
    "UnsupportedConfigError",
]
