"""Top-level hostsvc configuration."""

import json
import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..service.ServiceConfig import ServiceConfig
from .LogConfig import LogConfig


class HostsvcConfig(BaseModel):
    """Configuration file contents: the service descriptor and logging."""

    model_config = ConfigDict(extra="forbid")

    service: ServiceConfig
    log: LogConfig = Field(default_factory=LogConfig)

    @classmethod
    def get_home_dir(cls) -> Path:
        """Get hostsvc home directory based on HOSTSVC_HOME or default to ~/.hostsvc."""
        home_env = os.environ.get("HOSTSVC_HOME")
        if home_env:
            return Path(home_env).expanduser().resolve()
        return Path.home() / ".hostsvc"

    @classmethod
    def get_config_path(cls) -> Path:
        """Get path to config file based on HOSTSVC_HOME or default to ~/.hostsvc."""
        return cls.get_home_dir() / "config.json"

    @classmethod
    def load(cls, path: Path | None = None) -> "HostsvcConfig":
        """Load and validate config from file.

        Args:
            path: Config file to read; defaults to ``get_config_path()``

        Raises:
            ValueError: If config file not found, invalid JSON, or validation error
        """
        path = path or cls.get_config_path()

        if not path.exists():
            raise ValueError(f"Configuration file not found at {path}")

        try:
            with path.open() as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        try:
            return cls.model_validate(raw)
        except ValidationError as e:
            first = e.errors()[0]
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc)
            detail = f"{field}: {first.get('msg', str(e))}" if field else first.get("msg", str(e))
            raise ValueError(f"Configuration validation error: {detail}") from e

    def save(self, path: Path | None = None) -> Path:
        """Write config to file as JSON, creating the parent directory."""
        path = path or self.get_config_path()
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(self.to_dict(), indent=2) + "\n", encoding="utf-8")
        return path

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_defaults=True)
