"""Shared StageResult plumbing for service lifecycle commands."""

from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any

from pydantic import BaseModel

from ...logging_config import setup_logging
from ..config.HostsvcConfig import HostsvcConfig
from ..StageResult import StageResult
from .Service import Service


def _service_stage(
    announce: str,
    progress_message: str,
    output_class: type[BaseModel],
    status_field: str,
    action: Callable[[Service], tuple[str, dict[str, Any]]],
    config_path: Path | None = None,
) -> StageResult:
    """Build a StageResult that loads config, enters the service and runs ``action``.

    Args:
        announce: Stage 1 announcement
        progress_message: Progress text shown while ``action`` runs
        output_class: Output schema class to instantiate
        status_field: Name of the boolean state field in the output (e.g., "installed")
        action: Receives the entered Service; returns (message, extra output fields)
        config_path: Optional config file; defaults to $HOSTSVC_HOME/config.json
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        """Do the actual work - generator that yields progress and updates result.

        Yields: (progress_percent: float, message: str) tuples
        Updates result_obj.result, result_obj.output, and result_obj.success before finishing.
        """
        yield (0.1, "Loading configuration...")
        try:
            config = HostsvcConfig.load(config_path)
            setup_logging(config.log.level, config.log.file)

            yield (0.3, "Detecting init system...")
            with Service(config.service) as service:
                yield (0.6, progress_message)
                message, extra = action(service)

            yield (1.0, "Complete")
            result_obj.result = message
            result_obj.output = output_class(
                errors=[],
                warnings=[],
                message=message,
                **{status_field: True},
                **extra,
            ).model_dump(mode="python")
            result_obj.success = True
        except Exception as e:
            yield (1.0, "Complete")
            result_obj.result = f"Error: {e}"
            result_obj.output = output_class(
                errors=[str(e)],
                warnings=[],
                message=str(e),
                **{status_field: False},
            ).model_dump(mode="python")
            result_obj.success = False

    return StageResult(
        announce=announce,
        progress_callback=do_work,
    )
