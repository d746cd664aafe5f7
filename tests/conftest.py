"""Shared pytest configuration and fixtures for all tests."""

import json
import os
import signal
import threading
import time
from pathlib import Path

import pytest

from hostsvc.api.service import _wait_for_termination
from hostsvc.api.service.CommandError import CommandError
from hostsvc.api.service.Service import Service
from hostsvc.api.service._systemd._Impl import _Impl


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests with no external effects")
    config.addinivalue_line("markers", "integration: tests that need a real systemd and root")
    config.addinivalue_line("markers", "service: service adapter tests")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Configuration Helpers
# =============================================================================


def minimal_service_dict() -> dict:
    """Minimal valid service descriptor dict for testing."""
    return {
        "name": "svc",
        "executable": "/usr/bin/svc",
    }


def minimal_config_dict() -> dict:
    """Minimal valid hostsvc configuration dict for testing."""
    return {
        "service": minimal_service_dict(),
        "log": {"level": "WARNING"},
    }


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(name="minimal_config_dict")
def minimal_config_dict_fixture() -> dict:
    """Pytest fixture returning a fresh minimal config dict."""
    return minimal_config_dict()


@pytest.fixture
def run_cmd():
    """Execute a cmd function and return the result with progress_callback executed."""

    def _run(cmd_func, *args, **kwargs):
        result = cmd_func(*args, **kwargs)
        list(result.progress_callback(result))
        return result

    return _run


@pytest.fixture
def unit_dir(tmp_path, monkeypatch) -> Path:
    """Redirect unit files from /etc/systemd/system to a temp directory."""
    path = tmp_path / "etc" / "systemd" / "system"
    path.mkdir(parents=True)
    monkeypatch.setattr(_Impl, "UNIT_DIR", path)
    return path


class FakeSystemctl:
    """Records control-plane commands instead of running them."""

    def __init__(self):
        self.calls: list[list[str]] = []
        self._failures: dict[str, tuple[int, str]] = {}

    def fail(self, verb: str, returncode: int | None = 1, stderr: str = "") -> None:
        self._failures[verb] = (returncode, stderr)

    def __call__(self, name: str, *args: str) -> None:
        cmd = [name, *args]
        self.calls.append(cmd)
        if args and args[0] in self._failures:
            returncode, stderr = self._failures[args[0]]
            raise CommandError(cmd, returncode, stderr)

    @property
    def verbs(self) -> list[str]:
        return [call[1] for call in self.calls]


@pytest.fixture
def systemctl(monkeypatch) -> FakeSystemctl:
    """Replace the command runner used by the systemd backend."""
    fake = FakeSystemctl()
    monkeypatch.setattr("hostsvc.api.service._systemd._Impl.run_command", fake)
    return fake


@pytest.fixture
def systemd_host(monkeypatch):
    """Pretend the host runs systemd regardless of the test machine."""
    monkeypatch.setattr(Service, "detect_platform", staticmethod(lambda: "systemd"))


@pytest.fixture
def hostsvc_home(tmp_path, monkeypatch) -> Path:
    """Point HOSTSVC_HOME at a temp dir holding a minimal config.json."""
    home = tmp_path / ".hostsvc"
    home.mkdir()
    (home / "config.json").write_text(json.dumps(minimal_config_dict()), encoding="utf-8")
    monkeypatch.setenv("HOSTSVC_HOME", str(home))
    return home


@pytest.fixture
def fresh_termination_wait(monkeypatch):
    """Allow the once-per-process termination wait to run again."""
    monkeypatch.setattr(_wait_for_termination, "_consumed", False)


@pytest.fixture
def terminate_when_subscribed():
    """Send SIGTERM to this process once a handler replaces the current one.

    Returns a function that starts the sender thread; call it from a start hook.
    Signals in ``before`` are sent first, each followed by a short pause, and
    ``record`` is called with every signal just before it is sent.
    """
    threads: list[threading.Thread] = []

    def _start(
        signum: int = signal.SIGTERM,
        timeout: float = 5.0,
        before: tuple[int, ...] = (),
        record=None,
    ) -> None:
        original = signal.getsignal(signum)

        def _kill(sig: int) -> None:
            if record is not None:
                record(sig)
            os.kill(os.getpid(), sig)

        def _send() -> None:
            deadline = time.monotonic() + timeout
            while time.monotonic() < deadline:
                if signal.getsignal(signum) is not original:
                    for sig in before:
                        _kill(sig)
                        time.sleep(0.2)
                    _kill(signum)
                    return
                time.sleep(0.01)

        thread = threading.Thread(target=_send, daemon=True)
        threads.append(thread)
        thread.start()

    yield _start
    for thread in threads:
        thread.join(timeout=5)

