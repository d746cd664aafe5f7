"""Service status command - queries the live state of the unit."""

from collections.abc import Iterator
from pathlib import Path

from ...logging_config import setup_logging
from ..config.HostsvcConfig import HostsvcConfig
from ..StageResult import StageResult
from .Service import Service
from .ServiceOutputs import ServiceStatusOutput
from .ServiceStatus import ServiceStatus


def cmd_status(config_path: Path | None = None) -> StageResult:
    """Check service status.

    Nothing is cached: each call checks the unit file and asks the service
    manager whether the unit is active. The command succeeds whenever the
    query itself succeeds, whatever the state.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        try:
            config = HostsvcConfig.load(config_path)
            setup_logging(config.log.level, config.log.file)

            yield (0.5, "Querying service manager...")
            with Service(config.service) as service:
                status = service.status()
                unit_path = str(service.unit_path())

            yield (1.0, "Complete")
            if status is ServiceStatus.NOT_INSTALLED:
                message = f"Service '{config.service}' is not installed"
            else:
                message = f"Service '{config.service}' is {status.value}"
            result_obj.result = message
            result_obj.output = ServiceStatusOutput(
                errors=[],
                warnings=[],
                message=message,
                status=status.value,
                unit_path=unit_path,
            ).model_dump(mode="python")
            result_obj.success = True
        except Exception as e:
            yield (1.0, "Complete")
            result_obj.result = f"Error checking service status: {e}"
            result_obj.output = ServiceStatusOutput(
                errors=[str(e)],
                warnings=[],
                message=str(e),
                status="unknown",
            ).model_dump(mode="python")
            result_obj.success = False

    return StageResult(
        announce="Checking service status...",
        progress_callback=do_work,
    )
