"""Service status as observed through the control plane."""

from enum import Enum


class ServiceStatus(Enum):
    """Live state of a service unit; never cached locally."""

    RUNNING = "running"
    STOPPED = "stopped"
    NOT_INSTALLED = "not_installed"
