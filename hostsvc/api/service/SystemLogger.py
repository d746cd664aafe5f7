"""Logger backed by the system log facility."""

import logging
import queue
import sys
from logging.handlers import SysLogHandler

DEFAULT_SYSLOG_ADDRESS = "/dev/log"


class _ReportingSysLogHandler(SysLogHandler):
    """SysLogHandler that hands emission failures to the caller's queue."""

    def __init__(self, errors: "queue.Queue[BaseException] | None", **kwargs):
        super().__init__(**kwargs)
        self._errors = errors

    def handleError(self, record: logging.LogRecord) -> None:
        exc = sys.exc_info()[1]
        if self._errors is None or exc is None:
            super().handleError(record)
            return
        try:
            self._errors.put_nowait(exc)
        except queue.Full:
            super().handleError(record)


class SystemLogger:
    """Writes service messages to syslog under the service name.

    Failures of the underlying writer are reported asynchronously on
    ``errors`` instead of being printed to stderr.

    Raises:
        OSError: If the syslog socket cannot be opened
    """

    def __init__(
        self,
        name: str,
        errors: "queue.Queue[BaseException] | None" = None,
        address: str | tuple[str, int] = DEFAULT_SYSLOG_ADDRESS,
    ):
        self.name = name
        self.handler = _ReportingSysLogHandler(errors, address=address, facility=SysLogHandler.LOG_DAEMON)
        self.handler.ident = f"{name}: "
        self._logger = logging.getLogger(f"hostsvc.syslog.{name}")
        for old in list(self._logger.handlers):
            self._logger.removeHandler(old)
            old.close()
        self._logger.addHandler(self.handler)
        self._logger.setLevel(logging.INFO)
        self._logger.propagate = False

    def error(self, msg: str, *args) -> None:
        self._logger.error(msg, *args)

    def warning(self, msg: str, *args) -> None:
        self._logger.warning(msg, *args)

    def info(self, msg: str, *args) -> None:
        self._logger.info(msg, *args)

    def close(self) -> None:
        self._logger.removeHandler(self.handler)
        self.handler.close()
