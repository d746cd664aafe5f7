"""Output schemas for service commands."""

from pydantic import BaseModel, ConfigDict, Field


class _ServiceOutput(BaseModel):
    model_config = ConfigDict(extra="forbid")

    errors: list[str] = Field(..., description="Errors encountered")
    warnings: list[str] = Field(..., description="Non-fatal warnings")
    message: str = Field(..., description="Human readable summary")


class ServiceInstallOutput(_ServiceOutput):
    installed: bool
    unit_path: str | None = None


class ServiceUninstallOutput(_ServiceOutput):
    uninstalled: bool


class ServiceStartOutput(_ServiceOutput):
    running: bool


class ServiceStopOutput(_ServiceOutput):
    stopped: bool


class ServiceRestartOutput(_ServiceOutput):
    restarted: bool


class ServiceStatusOutput(_ServiceOutput):
    status: str
    unit_path: str | None = None
