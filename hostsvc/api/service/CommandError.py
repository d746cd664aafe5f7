"""Control-plane command failure."""

from .ServiceError import ServiceError


class CommandError(ServiceError):
    """Raised when an external control-plane command fails.

    The command's stderr is carried verbatim; it is never interpreted.
    """

    def __init__(self, command: list[str], returncode: int | None, stderr: str = ""):
        self.command = command
        self.returncode = returncode
        self.stderr = stderr
        joined = " ".join(command)
        if returncode is None:
            message = f"{joined!r} could not be run: {stderr}"
        else:
            message = f"{joined!r} failed with exit status {returncode}"
            if stderr:
                message += f": {stderr}"
        super().__init__(message)
