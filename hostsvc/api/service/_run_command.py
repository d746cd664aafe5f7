"""Run an external control-plane command; exit status is the only signal."""

import subprocess

from ...logging_config import get_logger
from .CommandError import CommandError

logger = get_logger("service.command")


def run_command(name: str, *args: str) -> None:
    """Run ``name`` with ``args`` and raise CommandError on any failure.

    Output is captured but never parsed; stderr is attached to the error as-is.
    """
    cmd = [name, *args]
    logger.debug("Running %s", " ".join(cmd))
    try:
        subprocess.run(cmd, check=True, capture_output=True, text=True)
    except subprocess.CalledProcessError as e:
        raise CommandError(cmd, e.returncode, (e.stderr or "").strip()) from e
    except OSError as e:
        raise CommandError(cmd, None, str(e)) from e
