"""
Pydantic model for site build settings, optionally loaded from TOML.
"""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any, Dict

from pydantic import BaseModel, ValidationError, field_validator

DEFAULT_TASKS_DIR = Path("tasks")
DEFAULT_OUTPUT_DIR = Path("visualization")
REFERENCE_PLACEHOLDER = "{task_id}"


class ConfigError(RuntimeError):
    """Raised when configuration files cannot be loaded or validated."""


class SiteConfig(BaseModel):
    """
    Settings for one site build.

    Attributes:
        tasks_dir: Directory holding the `*.json` task files.
        output_dir: Directory receiving the generated HTML.
        site_title: Prefix of every page title.
        project_url: Link target of the index heading.
        reference_url: External task link; `{task_id}` is replaced by the identifier.
    """
    tasks_dir: Path = DEFAULT_TASKS_DIR
    output_dir: Path = DEFAULT_OUTPUT_DIR
    site_title: str = "RE-ARC"
    project_url: str = "https://github.com/michaelhodel/re-arc/"
    reference_url: str = f"https://arcprize.org/play?task={REFERENCE_PLACEHOLDER}"

    model_config = {
        "extra": "forbid",
        "frozen": True,
    }

    @field_validator("reference_url")
    @classmethod
    def _check_reference_url(cls, value: str) -> str:
        if REFERENCE_PLACEHOLDER not in value:
            raise ValueError(f"reference_url must contain {REFERENCE_PLACEHOLDER}")
        return value

    def reference_link(self, identifier: str) -> str:
        return self.reference_url.replace(REFERENCE_PLACEHOLDER, identifier)


def load_config(path: Path | str) -> SiteConfig:
    """
    Load and validate a TOML config file into a SiteConfig instance.

    Relative directories in the file are kept relative, so they resolve against
    the invocation directory like the defaults do.

    Raises:
        ConfigError: If the file is missing, unreadable, or invalid.
    """
    config_path = Path(path).expanduser().resolve()
    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        with config_path.open("rb") as handle:
            raw_data: Dict[str, Any] = tomllib.load(handle)
    except OSError as exc:
        raise ConfigError(f"Unable to read configuration file: {exc}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML in configuration file: {exc}") from exc

    try:
        return SiteConfig.model_validate(raw_data)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc
