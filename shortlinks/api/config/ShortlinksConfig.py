"""Top-level shortlinks configuration."""

import json
import os
from contextlib import suppress
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .ContextConfig import ContextConfig
from .LogConfig import LogConfig
from .ScanConfig import ScanConfig


class ShortlinksConfig(BaseModel):
    """Top-level configuration for the shortlinks commands."""

    model_config = ConfigDict(extra="forbid")

    context: ContextConfig
    scan: ScanConfig = Field(default_factory=ScanConfig)
    log: LogConfig = Field(default_factory=LogConfig)

    @classmethod
    def get_home_dir(cls) -> Path:
        """Get home directory based on SHORTLINKS_HOME or default to ~/.shortlinks."""
        home_env = os.environ.get("SHORTLINKS_HOME")
        if home_env:
            return Path(home_env).expanduser().resolve()
        return Path.home() / ".shortlinks"

    @classmethod
    def get_config_path(cls) -> Path:
        return cls.get_home_dir() / "config.json"

    @classmethod
    def load(cls) -> "ShortlinksConfig":
        """Load and validate config from file.

        Raises:
            ValueError: If config file not found, invalid JSON, or validation error
        """
        path = cls.get_config_path()

        if not path.exists():
            raise ValueError(f"Configuration file not found at {path}")

        try:
            with path.open() as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ValueError(f"Configuration in {path} must be a JSON object")

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": ()}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e

    def to_dict(self) -> dict[str, Any]:
        return {
            "context": self.context.model_dump(),
            "scan": self.scan.model_dump(),
            "log": self.log.model_dump(),
        }

    def save(self) -> None:
        """Save the configuration atomically (temp file, then rename).

        Raises:
            RuntimeError: If the file cannot be written
        """
        path = self.get_config_path()
        temp_path = path.with_suffix(path.suffix + ".tmp")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with temp_path.open("w") as fh:
                json.dump(self.to_dict(), fh, indent=4)
            temp_path.replace(path)
        except OSError as e:
            with suppress(OSError):
                if temp_path.exists():
                    temp_path.unlink()
            raise RuntimeError(f"Failed to save config: {e}") from e
