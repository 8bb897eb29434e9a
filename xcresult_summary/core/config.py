"""
Configuration management for xcresult-summary.
"""

import os
import tomllib
from pathlib import Path
from typing import Optional, Dict, Any
from dataclasses import dataclass

from xcresult_summary.core.errors import ConfigurationError

PATH_KEYS = frozenset({
    "xcresult_path", "output_file", "summary_file", "config_file",
})

CONFIG_FILE_NAME = "xcresult_summary.toml"
CONFIG_ENV_VAR = "XCRESULT_SUMMARY_CONFIG"


@dataclass
class Config:
    """Configuration class for xcresult-summary."""

    # Bundle to inspect; read from the action input when not given here
    xcresult_path: Optional[Path] = None

    # Prefix stripped from absolute source paths in the report
    workspace: Optional[str] = None

    # GitHub Actions output and step summary files
    output_file: Optional[Path] = None
    summary_file: Optional[Path] = None

    # xcresulttool is invoked through this executable
    xcrun: str = "xcrun"

    verbosity: int = 0  # 0=minimal, 1=progress, 2=commands, 3=debug
    config_file: Optional[Path] = None

    def __post_init__(self):
        """Post-initialization processing."""
        self._load_config_file()

        if self.workspace is None:
            self.workspace = os.environ.get("GITHUB_WORKSPACE") or None
        if self.output_file is None and os.environ.get("GITHUB_OUTPUT"):
            self.output_file = Path(os.environ["GITHUB_OUTPUT"])
        if self.summary_file is None and os.environ.get("GITHUB_STEP_SUMMARY"):
            self.summary_file = Path(os.environ["GITHUB_STEP_SUMMARY"])

        for key in ("xcresult_path", "output_file", "summary_file"):
            value = getattr(self, key)
            if isinstance(value, str):
                setattr(self, key, Path(value) if value else None)

        if self.workspace:
            self.workspace = str(self.workspace).rstrip("/") or None

        if not 0 <= self.verbosity <= 3:
            raise ValueError(f"verbosity must be between 0 and 3, got {self.verbosity}")

    def _load_config_file(self) -> None:
        """Load defaults from xcresult_summary.toml if present.

        Values already set on the instance take precedence over the file.
        """
        env_path = os.environ.get(CONFIG_ENV_VAR)
        if self.config_file is None:
            if env_path:
                self.config_file = Path(env_path).resolve()
            else:
                self.config_file = Path.cwd() / CONFIG_FILE_NAME
        else:
            self.config_file = Path(self.config_file)

        if not self.config_file.exists():
            return

        try:
            data = tomllib.loads(self.config_file.read_text())
        except (OSError, tomllib.TOMLDecodeError) as e:
            raise ConfigurationError(f"Failed to read config file: {self.config_file}: {e}") from e

        table = data.get("xcresult_summary") or data.get("tool", {}).get("xcresult_summary", {})
        if not isinstance(table, dict):
            raise ConfigurationError(
                f"Config file {self.config_file} must contain an [xcresult_summary] table"
            )

        defaults = Config.__dataclass_fields__
        for key, value in table.items():
            if key not in defaults or key == "config_file" or value is None:
                continue
            if getattr(self, key) != defaults[key].default:
                continue
            setattr(self, key, value)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            "xcresult_path": str(self.xcresult_path) if self.xcresult_path else None,
            "workspace": self.workspace,
            "output_file": str(self.output_file) if self.output_file else None,
            "summary_file": str(self.summary_file) if self.summary_file else None,
            "xcrun": self.xcrun,
            "verbosity": self.verbosity,
            "config_file": str(self.config_file) if self.config_file else None,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Config":
        """Create configuration from dictionary."""
        data = dict(data)
        for key in PATH_KEYS:
            if key in data and isinstance(data[key], str):
                data[key] = Path(data[key])
        return cls(**data)
