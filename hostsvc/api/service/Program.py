"""Caller-supplied start/stop hooks."""

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from ._AbstractImpl import _AbstractImpl


class Program(Protocol):
    """The program a service runs.

    ``start`` must not block; it should launch the real work (a thread, a
    server) and return. ``stop`` should finish quickly; its return value is
    handed back by ``run()``.
    """

    def start(self, service: "_AbstractImpl") -> None: ...

    def stop(self, service: "_AbstractImpl") -> Any: ...
