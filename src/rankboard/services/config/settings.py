"""StoreSettings - connection and display configuration read from .env."""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar

from dotenv import dotenv_values

_log = logging.getLogger(__name__)

ENV_FILE_NAME = ".env"
ENV_PREFIX = "RANKBOARD_"


@dataclass
class StoreSettings:
    """Where the leaderboard lives and how to present it."""

    DEFAULT_TABLE: ClassVar[str] = "sit-leaderboard"
    DEFAULT_TIMEOUT: ClassVar[float] = 10.0
    DEFAULT_TITLE: ClassVar[str] = "Leaderboard"

    url: str = ""
    api_key: str = ""
    table: str = DEFAULT_TABLE
    timeout: float = DEFAULT_TIMEOUT
    title: str = DEFAULT_TITLE
    log_file: str = ""

    @classmethod
    def from_mapping(cls, values: Mapping[str, str]) -> "StoreSettings":
        """Build settings from RANKBOARD_* keys; missing or blank keys use defaults."""

        def get(name: str, default: str = "") -> str:
            return (values.get(ENV_PREFIX + name) or "").strip() or default

        return cls(
            url=get("STORE_URL"),
            api_key=get("STORE_KEY"),
            table=get("TABLE", cls.DEFAULT_TABLE),
            timeout=_parse_timeout(get("TIMEOUT")),
            title=get("TITLE", cls.DEFAULT_TITLE),
            log_file=get("LOG_FILE"),
        )


def _parse_timeout(raw: str) -> float:
    if not raw:
        return StoreSettings.DEFAULT_TIMEOUT
    try:
        timeout = float(raw)
    except ValueError:
        _log.warning("Ignoring invalid %sTIMEOUT %r", ENV_PREFIX, raw)
        return StoreSettings.DEFAULT_TIMEOUT
    if timeout <= 0:
        _log.warning("Ignoring non-positive %sTIMEOUT %r", ENV_PREFIX, raw)
        return StoreSettings.DEFAULT_TIMEOUT
    return timeout


def load_settings(
    env_path: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> StoreSettings:
    """Load settings from a .env file, overridden by the process environment.

    ``env_path`` defaults to .env in the current working directory.
    """
    if env_path is None:
        env_path = Path.cwd() / ENV_FILE_NAME
    values: dict[str, str] = {}
    if env_path.exists():
        values.update(
            {k: v for k, v in dotenv_values(env_path).items() if v is not None}
        )
    environ = os.environ if environ is None else environ
    values.update({k: v for k, v in environ.items() if k.startswith(ENV_PREFIX)})
    return StoreSettings.from_mapping(values)
