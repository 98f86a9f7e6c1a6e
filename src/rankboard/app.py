"""Rankboard - Textual app for viewing and editing a remote leaderboard.

The app owns one LeaderboardSynchronizer and the record store behind it.
The leaderboard screen renders the synchronizer's snapshot; the app-level
Ctrl+Shift+E binding flips edit mode.
"""

import logging
import os
from pathlib import Path

from textual.app import App
from textual.binding import Binding
from textual.logging import TextualHandler

from rankboard import __version__
from rankboard.screens.main import LeaderboardScreen
from rankboard.services.config import StoreSettings, load_settings
from rankboard.services.leaderboard import LeaderboardSynchronizer
from rankboard.services.store import RecordStore, build_store

_log = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class RankboardApp(App):
    """Main application - a single leaderboard screen."""

    CSS_PATH = "main.tcss"
    TITLE = f"Rankboard v{__version__}"
    ENABLE_COMMAND_PALETTE = False

    BINDINGS = [
        # Many terminals send Ctrl+E for Ctrl+Shift+E
        Binding(
            "ctrl+shift+e,ctrl+e",
            "toggle_edit_mode",
            "Edit mode",
            priority=True,
        ),
    ]

    def __init__(
        self, store: RecordStore, settings: StoreSettings | None = None
    ) -> None:
        super().__init__()
        self._store_settings = settings or StoreSettings()
        self._record_store = store
        self.synchronizer = LeaderboardSynchronizer(store)

    def on_mount(self) -> None:
        """Push the leaderboard screen, which starts the initial fetch."""
        self.push_screen(
            LeaderboardScreen(self.synchronizer, self._store_settings.title)
        )

    async def on_unmount(self) -> None:
        await self._record_store.aclose()

    def action_toggle_edit_mode(self) -> None:
        editing = self.synchronizer.toggle_edit_mode()
        _log.debug("Edit mode %s", "on" if editing else "off")
        for screen in self.screen_stack:
            if isinstance(screen, LeaderboardScreen):
                screen.sync_edit_mode()


def configure_logging(settings: StoreSettings) -> None:
    """Route package logs to the Textual console, and to a file if configured.

    Safe to call more than once: handlers already attached are not added again.
    """
    logger = logging.getLogger("rankboard")
    logger.setLevel(logging.DEBUG)
    if not any(isinstance(h, TextualHandler) for h in logger.handlers):
        logger.addHandler(TextualHandler())
    if settings.log_file:
        log_path = os.path.abspath(Path(settings.log_file).expanduser())
        if any(
            isinstance(h, logging.FileHandler) and h.baseFilename == log_path
            for h in logger.handlers
        ):
            return
        handler = logging.FileHandler(log_path)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler.setLevel(logging.INFO)
        logger.addHandler(handler)


def main() -> None:
    """Entry point for the application."""
    settings = load_settings()
    configure_logging(settings)
    app = RankboardApp(build_store(settings), settings)
    app.run()


if __name__ == "__main__":
    main()
