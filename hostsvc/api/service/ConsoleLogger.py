"""Logger that writes to the console when running interactively."""

import logging
import sys


class ConsoleLogger:
    """Writes service messages to stderr."""

    def __init__(self, name: str = "hostsvc.console"):
        self._logger = logging.getLogger(name)
        if not self._logger.handlers:
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
            self._logger.addHandler(handler)
            self._logger.setLevel(logging.INFO)
            self._logger.propagate = False

    def error(self, msg: str, *args) -> None:
        self._logger.error(msg, *args)

    def warning(self, msg: str, *args) -> None:
        self._logger.warning(msg, *args)

    def info(self, msg: str, *args) -> None:
        self._logger.info(msg, *args)


CONSOLE_LOGGER = ConsoleLogger()
