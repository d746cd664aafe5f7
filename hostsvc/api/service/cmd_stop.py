"""Service stop command."""

from pathlib import Path

from ..StageResult import StageResult
from ._service_stage import _service_stage
from .Service import Service
from .ServiceOutputs import ServiceStopOutput


def cmd_stop(config_path: Path | None = None) -> StageResult:
    """Stop service via system service manager."""

    def stop(service: Service) -> tuple[str, dict]:
        service.stop()
        return f"Service '{service}' stopped", {}

    return _service_stage(
        announce="Stopping service...",
        progress_message="Stopping via service manager...",
        output_class=ServiceStopOutput,
        status_field="stopped",
        action=stop,
        config_path=config_path,
    )
