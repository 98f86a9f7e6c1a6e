"""Config services for store connection and display settings."""

from rankboard.services.config.settings import (
    ENV_FILE_NAME,
    StoreSettings,
    load_settings,
)

__all__ = [
    "ENV_FILE_NAME",
    "StoreSettings",
    "load_settings",
]
