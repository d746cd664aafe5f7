"""Block until the process receives a termination signal.

The subscription is created and torn down inside a single call, and a process
may establish it at most once; later calls return immediately.
"""

import signal
import socket
import threading

from ...logging_config import get_logger

logger = get_logger("service.signals")

TERMINATION_SIGNALS: tuple[signal.Signals, ...] = (signal.SIGINT, signal.SIGTERM)

_lock = threading.Lock()
_consumed = False


def _ignore(_signum, _frame) -> None:
    # Delivery is observed through the wakeup fd
    pass


def _subscribe_and_wait(signals: tuple[signal.Signals, ...]) -> signal.Signals:
    wanted = {int(s) for s in signals}
    reader, writer = socket.socketpair()
    writer.setblocking(False)
    previous_handlers = {}
    previous_fd = None
    try:
        # The wakeup fd is installed before the handlers so no delivery is lost
        previous_fd = signal.set_wakeup_fd(writer.fileno(), warn_on_full_buffer=False)
        for signum in signals:
            previous_handlers[signum] = signal.signal(signum, _ignore)
        logger.debug("Waiting for %s", ", ".join(s.name for s in signals))
        # Every signal with a Python handler lands on the wakeup fd; skip the others
        while True:
            received = reader.recv(1)[0]
            if received in wanted:
                break
            logger.debug("Ignoring signal %d while waiting", received)
    finally:
        for signum, handler in previous_handlers.items():
            signal.signal(signum, signal.SIG_DFL if handler is None else handler)
        if previous_fd is not None:
            signal.set_wakeup_fd(previous_fd)
        reader.close()
        writer.close()
    return signal.Signals(received)


def wait_for_termination(signals: tuple[signal.Signals, ...] = TERMINATION_SIGNALS) -> signal.Signals | None:
    """Wait, with no timeout, for one of ``signals``.

    Must be called from the main thread. Returns the signal received, or None
    when the wait has already been performed in this process.
    """
    global _consumed
    with _lock:
        if _consumed:
            logger.debug("Termination wait already performed in this process")
            return None
        _consumed = True
        try:
            received = _subscribe_and_wait(signals)
        except Exception:
            # A failed wait leaves the single wait available
            _consumed = False
            raise
    logger.info("Received %s", received.name)
    return received
