"""Service uninstall command - disables the service and removes its unit files."""

from pathlib import Path

from ..StageResult import StageResult
from ._service_stage import _service_stage
from .Service import Service
from .ServiceOutputs import ServiceUninstallOutput


def cmd_uninstall(config_path: Path | None = None) -> StageResult:
    """Uninstall system service."""

    def uninstall(service: Service) -> tuple[str, dict]:
        service.uninstall()
        return f"Service '{service}' uninstalled", {}

    return _service_stage(
        announce="Uninstalling service...",
        progress_message="Uninstalling service...",
        output_class=ServiceUninstallOutput,
        status_field="uninstalled",
        action=uninstall,
        config_path=config_path,
    )
