"""Service install command - writes unit files and enables the service."""

from pathlib import Path

from ..StageResult import StageResult
from ._service_stage import _service_stage
from .Service import Service
from .ServiceOutputs import ServiceInstallOutput


def cmd_install(config_path: Path | None = None) -> StageResult:
    """Install the configured program as a system service.

    Reads the service descriptor from the config file, renders the unit
    file(s), enables the unit and reloads the service manager. A failed
    install is not rolled back; run ``cmd_uninstall`` to clean up.
    """

    def install(service: Service) -> tuple[str, dict]:
        service.install()
        unit_path = service.unit_path()
        return f"Service '{service}' installed ({unit_path})", {"unit_path": str(unit_path)}

    return _service_stage(
        announce="Installing service...",
        progress_message="Installing service...",
        output_class=ServiceInstallOutput,
        status_field="installed",
        action=install,
        config_path=config_path,
    )
