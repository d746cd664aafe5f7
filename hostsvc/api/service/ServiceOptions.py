"""Typed per-service options with documented defaults."""

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator

_SIGNAL_PATTERN = re.compile(r"^(SIG)?[A-Z][A-Z0-9+-]*$|^[0-9]+$")


class ServiceOptions(BaseModel):
    """Options consulted by a backend, each with a fixed default."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    user_service: bool = Field(False, description="Install as a user-scope service (not supported by systemd)")
    reload_signal: str | None = Field(None, description="Signal sent to the main PID on reload (e.g. 'HUP')")
    pid_file: str | None = Field(None, description="Path of the PID file the service writes")
    run_wait: bool = Field(True, description="Block in run() until SIGINT or SIGTERM arrives")

    @field_validator("reload_signal")
    @classmethod
    def validate_reload_signal(cls, v: str | None) -> str | None:
        if v is None:
            return v
        if not _SIGNAL_PATTERN.match(v):
            raise ValueError(f"options.reload_signal must be a signal name or number (e.g. 'HUP'), got: {v!r}")
        return v
