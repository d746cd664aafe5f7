"""Unit tests for the Service facade and backend selection."""

import importlib

import pytest

from hostsvc.api.service import Service, ServiceConfig, ServiceStatus
from hostsvc.api.service._systemd._Impl import _Impl

pytestmark = pytest.mark.service

# The package re-exports the class under the module name
service_module = importlib.import_module("hostsvc.api.service.Service")


@pytest.fixture
def config() -> ServiceConfig:
    return ServiceConfig(name="svc", executable="/usr/bin/svc")


def test_detect_platform_systemd(monkeypatch, tmp_path):
    monkeypatch.setattr(service_module, "_BACKEND_REGISTRY", {"systemd": ("_systemd", str(tmp_path))})

    assert Service.detect_platform() == "systemd"


def test_detect_platform_unsupported(monkeypatch, tmp_path):
    missing = tmp_path / "no-such-run-dir"
    monkeypatch.setattr(service_module, "_BACKEND_REGISTRY", {"systemd": ("_systemd", str(missing))})

    with pytest.raises(RuntimeError, match="Unsupported init system"):
        Service.detect_platform()


def test_unknown_backend_rejected(config):
    with pytest.raises(ValueError, match="Unsupported backend type: 'upstart'"):
        with Service(config, platform="upstart"):
            pass


def test_methods_require_context(config):
    service = Service(config)

    with pytest.raises(RuntimeError, match="Service not initialized"):
        service.install()
    with pytest.raises(RuntimeError, match="Service not initialized"):
        service.status()


def test_enter_selects_systemd_backend(config, systemd_host):
    with Service(config) as service:
        assert service.platform == "systemd"
        assert isinstance(service._impl, _Impl)
        assert service._impl.config is config


def test_forwards_to_backend(config, unit_dir, systemctl):
    with Service(config, platform="systemd") as service:
        service.install()
        assert service.unit_path() == unit_dir / "svc.service"
        assert service.status() is ServiceStatus.RUNNING
        service.restart()

    assert systemctl.verbs == ["enable", "daemon-reload", "is-active", "restart"]


def test_run_passes_program_through():
    class Program:
        def __init__(self):
            self.started_with = None

        def start(self, service):
            self.started_with = service

        def stop(self, service):
            return 7

    program = Program()
    config = ServiceConfig(name="svc", executable="/usr/bin/svc", options={"run_wait": False})
    with Service(config, program, platform="systemd") as service:
        assert service.run() == 7

    assert isinstance(program.started_with, _Impl)


def test_str_uses_descriptor(config):
    assert str(Service(config)) == "svc"
