"""Application configuration.

Configuration is loaded from environment variables. For local use, you can provide a
`.env` file in the working directory, point `TASKTIME_ENV_FILE` at one, or pass
`--env-file` on the command line.
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from tasktime.errors import ConfigError

DEFAULT_HIGHLIGHT_STYLE = (
    "color:#44dddd;font-family:Courier;font-size:11pt;font-weight:600;letter-spacing:-1px;"
)
DEFAULT_LABEL_STYLE = "color:#888;"
DEFAULT_LABEL_PREFIX = " — ⏱️ "


class Settings(BaseSettings):
    """tasktime settings.

    All fields are environment-configurable. Prefix is `TASKTIME_`.
    """

    model_config = SettingsConfigDict(
        env_prefix="TASKTIME_",
        env_file=None,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Core
    log_level: str = Field(default="INFO")

    # Annotation payloads
    highlight_style: str = Field(default=DEFAULT_HIGHLIGHT_STYLE)
    label_style: str = Field(default=DEFAULT_LABEL_STYLE)
    label_prefix: str = Field(default=DEFAULT_LABEL_PREFIX)

    # Outline scanner
    indent_width: int = Field(default=4, ge=1, le=16)

    # Free-form host setting, stored and echoed back, never interpreted
    user_setting: str = Field(default="default")


def _resolve_env_file(explicit: Path | None) -> Path | None:
    """Pick the dotenv file: explicit argument, then `TASKTIME_ENV_FILE`, then `./.env`.

    A file named explicitly or through the environment must exist; the working
    directory fallback is optional.
    """

    if explicit is None and not os.getenv("TASKTIME_ENV_FILE"):
        default_env = Path.cwd() / ".env"
        return default_env if default_env.is_file() else None

    path = explicit if explicit is not None else Path(os.environ["TASKTIME_ENV_FILE"])
    if not path.is_file():
        raise ConfigError(path)
    return path


def load_settings(env_file: Path | None = None) -> Settings:
    """Load settings from the environment and an optional dotenv file.

    Args:
        env_file: Dotenv file to read; overrides `TASKTIME_ENV_FILE`.

    Raises:
        ConfigError: The chosen dotenv file does not exist.
    """

    return Settings(_env_file=_resolve_env_file(env_file))
