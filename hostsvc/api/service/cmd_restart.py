"""Service restart command."""

from pathlib import Path

from ..StageResult import StageResult
from ._service_stage import _service_stage
from .Service import Service
from .ServiceOutputs import ServiceRestartOutput


def cmd_restart(config_path: Path | None = None) -> StageResult:
    """Restart service via system service manager."""

    def restart(service: Service) -> tuple[str, dict]:
        service.restart()
        return f"Service '{service}' restarted", {}

    return _service_stage(
        announce="Restarting service...",
        progress_message="Restarting via service manager...",
        output_class=ServiceRestartOutput,
        status_field="restarted",
        action=restart,
        config_path=config_path,
    )
