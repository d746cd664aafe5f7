"""Service descriptor with Pydantic validation."""

import re
import sys
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .ServiceError import ServiceError
from .ServiceOptions import ServiceOptions

# Characters systemd accepts in a unit name prefix
_UNIT_NAME_PATTERN = re.compile(r"^[A-Za-z0-9:_.\\@-]+$")
_UMASK_PATTERN = re.compile(r"^[0-7]{3,4}$")
_LINE_FIELDS = (
    "name",
    "display_name",
    "description",
    "executable",
    "user_name",
    "working_directory",
    "chroot",
    "socket_port",
    "socket_description",
)


class ServiceConfig(BaseModel):
    """Description of a program to run as a background service.

    Immutable once built. Backends derive every file path and control-plane
    argument from these fields.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(..., description="Service name used for unit and socket file names")
    display_name: str = Field("", description="Human readable name")
    description: str = Field("", description="Long description of the service")
    executable: str | None = Field(None, description="Executable path (defaults to the running interpreter)")
    arguments: tuple[str, ...] = Field((), description="Arguments passed to the executable")
    user_name: str | None = Field(None, description="Run the service as this user")
    working_directory: str | None = Field(None, description="Initial working directory")
    chroot: str | None = Field(None, description="Root directory for the service process")
    umask: str | None = Field(None, description="Octal file mode creation mask (e.g. '022')")
    limit_nofile: int | None = Field(None, ge=0, description="Maximum number of open files")
    with_socket: bool = Field(False, description="Also configure socket activation")
    socket_port: str = Field("", description="ListenStream address for socket activation")
    socket_description: str = Field("", description="Description of the socket unit")
    options: ServiceOptions = Field(default_factory=ServiceOptions, description="Typed backend options")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v:
            raise ValueError("service.name is required")
        if v.endswith(".service") or v.endswith(".socket"):
            raise ValueError(f"service.name must not carry a unit suffix, got: {v!r}")
        if not _UNIT_NAME_PATTERN.match(v):
            raise ValueError(
                f"service.name must be a valid unit name (alphanumerics and ':_.\\@-'), got: {v!r}"
            )
        return v

    @field_validator("umask")
    @classmethod
    def validate_umask(cls, v: str | None) -> str | None:
        if v is not None and not _UMASK_PATTERN.match(v):
            raise ValueError(f"service.umask must be an octal mask such as '022', got: {v!r}")
        return v

    @model_validator(mode="after")
    def validate_single_lines(self) -> "ServiceConfig":
        values: list[tuple[str, Any]] = [(field, getattr(self, field)) for field in _LINE_FIELDS]
        values.extend(("arguments", arg) for arg in self.arguments)
        values.append(("options.pid_file", self.options.pid_file))
        for field, value in values:
            if isinstance(value, str) and ("\n" in value or "\r" in value):
                raise ValueError(f"service.{field} must not contain line breaks")
        if self.with_socket and not self.socket_port:
            raise ValueError("service.socket_port is required when service.with_socket is true")
        return self

    def exec_path(self) -> str:
        """Path of the executable the service manager should launch."""
        if self.executable:
            return self.executable
        if not sys.executable:
            raise ServiceError("Cannot determine executable path; set service.executable")
        return sys.executable

    def __str__(self) -> str:
        return self.display_name or self.name
