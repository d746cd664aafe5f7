"""
hostsvc - run a program as a native background service.

Renders systemd unit files, registers them with the service manager and
bridges termination signals to a program's start/stop hooks.
"""

__version__ = "0.3.0"

from hostsvc.api.service.Program import Program
from hostsvc.api.service.Service import Service
from hostsvc.api.service.ServiceConfig import ServiceConfig
from hostsvc.api.service.ServiceOptions import ServiceOptions

__all__ = ["Program", "Service", "ServiceConfig", "ServiceOptions", "__version__"]
