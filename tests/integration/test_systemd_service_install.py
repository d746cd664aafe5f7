"""Integration test for systemd service installation.

Installs a real unit under /etc/systemd/system, so it needs root on a host
(or container) where systemd is PID 1. Skipped everywhere else.
"""

import os
import platform
import shutil
import subprocess
from pathlib import Path

import pytest

from hostsvc.api.service.Service import Service
from hostsvc.api.service.ServiceConfig import ServiceConfig
from hostsvc.api.service.ServiceStatus import ServiceStatus


def _check_systemd_available() -> bool:
    """Check that systemd is PID 1 and systemctl answers."""
    if platform.system() != "Linux" or shutil.which("systemctl") is None:
        return False
    try:
        if Path("/proc/1/comm").read_text().strip() != "systemd":
            return False
        result = subprocess.run(["systemctl", "--version"], capture_output=True, text=True, timeout=2)
    except (OSError, subprocess.TimeoutExpired):
        return False
    return result.returncode == 0


pytestmark = [
    pytest.mark.service,
    pytest.mark.skipif(not _check_systemd_available(), reason="systemd is not running as PID 1"),
    pytest.mark.skipif(os.geteuid() != 0, reason="installing system units requires root"),
]


@pytest.mark.timeout(60)
def test_systemd_service_install_lifecycle():
    """Install, start, query, stop and uninstall a socket-activated sleeper."""
    sleep = shutil.which("sleep") or "/bin/sleep"
    config = ServiceConfig(
        name=f"hostsvc-it-{os.getpid()}",
        description="hostsvc integration test",
        executable=sleep,
        arguments=("infinity",),
        with_socket=True,
        socket_port="127.0.0.1:47613",
    )

    with Service(config) as service:
        assert service.platform == "systemd"
        assert service.status() is ServiceStatus.NOT_INSTALLED
        service.install()
        try:
            assert service.unit_path().exists()
            service.start()
            assert service.status() is ServiceStatus.RUNNING
            service.stop()
            assert service.status() is ServiceStatus.STOPPED
        finally:
            subprocess.run(["systemctl", "stop", f"{config.name}.socket"], check=False)
            service.uninstall()
            subprocess.run(["systemctl", "daemon-reload"], check=False)

        assert service.status() is ServiceStatus.NOT_INSTALLED
