"""Service start command."""

from pathlib import Path

from ..StageResult import StageResult
from ._service_stage import _service_stage
from .Service import Service
from .ServiceOutputs import ServiceStartOutput


def cmd_start(config_path: Path | None = None) -> StageResult:
    """Start service via system service manager."""

    def start(service: Service) -> tuple[str, dict]:
        service.start()
        return f"Service '{service}' started", {}

    return _service_stage(
        announce="Starting service...",
        progress_message="Starting via service manager...",
        output_class=ServiceStartOutput,
        status_field="running",
        action=start,
        config_path=config_path,
    )
