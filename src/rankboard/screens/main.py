"""Leaderboard screen - ranked table with an optional edit mode.

Layout:
+------------------------------------------------+
|              Leaderboard                       |
|          Last Updated: 2026-10-19              |
+------------------------------------------------+
| #      | Name                     | Score      |
|--------+--------------------------+------------|
| #1 🥇  | Ann                      | 95         |
| #2 🥈  | Bo                       | 80         |
+------------------------------------------------+
| [Name........] [Score] [Add]     (edit mode)   |
+------------------------------------------------+

Ctrl+Shift+E toggles edit mode. In edit mode, Enter edits the highlighted
row and Delete removes it.
"""

from datetime import date
from typing import ClassVar

from rich.text import Text
from textual import on, work
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Center, Horizontal, Vertical
from textual.screen import Screen
from textual.widgets import (
    Button,
    DataTable,
    Footer,
    Input,
    LoadingIndicator,
    Static,
)

from rankboard.modals.edit_entry_modal import EditEntryModal, EntryEdit
from rankboard.services.leaderboard import (
    AddOutcome,
    Entry,
    LeaderboardSynchronizer,
    coerce_score,
)

LOCAL_ROW_STYLE = "bold #F1FA8C"
MEDALS = ("🥇", "🥈", "🥉")
EDIT_MODE_BANNER = "✏️  EDIT MODE ACTIVE  ✏️\nPress Ctrl+Shift+E to exit"


def format_rank(rank: int) -> str:
    """Rank label with a medal for the podium places."""
    if rank <= len(MEDALS):
        return f"#{rank} {MEDALS[rank - 1]}"
    return f"#{rank}"


class LeaderboardScreen(Screen):
    """Ranked leaderboard view backed by a LeaderboardSynchronizer."""

    BINDINGS: ClassVar[list[Binding]] = [
        Binding("q", "app.quit", "Quit"),
        Binding("r", "refresh", "Refresh"),
        Binding("delete", "remove_selected", "Delete", show=False),
    ]

    def __init__(self, synchronizer: LeaderboardSynchronizer, title: str) -> None:
        super().__init__()
        self._synchronizer = synchronizer
        self._board_title = title

    def compose(self) -> ComposeResult:
        with Vertical(id="board"):
            yield Static(self._board_title, id="board-title", classes="title")
            yield Static(
                f"Last Updated: {date.today().isoformat()}", id="last-updated"
            )
            yield Static(EDIT_MODE_BANNER, id="edit-banner")

            with Center(id="loading-container"):
                yield LoadingIndicator(id="loading")

            yield DataTable(id="board-table", cursor_type="row", zebra_stripes=True)

            with Horizontal(id="add-form"):
                yield Input(placeholder="Enter name...", id="new-name")
                yield Input(placeholder="Score", id="new-score")
                yield Button("Add", id="add-btn", variant="success")

        yield Footer()

    def on_mount(self) -> None:
        table = self.query_one("#board-table", DataTable)
        table.add_column("#", key="rank", width=8)
        table.add_column("Name", key="name", width=32)
        table.add_column("Score", key="score", width=10)
        self.sync_edit_mode()
        self._run_fetch()

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render_snapshot(self) -> None:
        """Redraw the table from the synchronizer's snapshot."""
        if not self.is_mounted:
            return
        self.query_one("#loading-container").display = self._synchronizer.loading

        table = self.query_one("#board-table", DataTable)
        cursor_row = table.cursor_row
        table.clear()
        for rank, entry in enumerate(self._synchronizer.snapshot, start=1):
            cells = [format_rank(rank), entry.name, str(entry.score)]
            if entry.is_local:
                cells = [Text(c, style=LOCAL_ROW_STYLE) for c in cells]
            table.add_row(*cells)

        if table.row_count:
            table.move_cursor(row=min(cursor_row, table.row_count - 1))

    def sync_edit_mode(self) -> None:
        """Show or hide the edit-only widgets."""
        editing = self._synchronizer.edit_mode
        self.query_one("#edit-banner").display = editing
        self.query_one("#add-form").display = editing
        if not editing and self.focused is not None and self.focused.id in (
            "new-name",
            "new-score",
            "add-btn",
        ):
            self.query_one("#board-table").focus()

    def _selected_position(self) -> int | None:
        table = self.query_one("#board-table", DataTable)
        if not table.row_count:
            return None
        return table.cursor_row

    # ------------------------------------------------------------------
    # Workers: each store operation runs independently and may overlap
    # ------------------------------------------------------------------

    @work(group="store")
    async def _run_fetch(self) -> None:
        await self._synchronizer.fetch_all()
        self.render_snapshot()

    @work(group="store")
    async def _run_add(self, name: str, raw_score: str) -> None:
        outcome = await self._synchronizer.add_entry(name, raw_score)
        if outcome is AddOutcome.REJECTED:
            return
        self.query_one("#new-name", Input).value = ""
        self.query_one("#new-score", Input).value = ""
        self.render_snapshot()

    @work(group="store")
    async def _run_remove(self, position: int) -> None:
        await self._synchronizer.remove_entry(position)
        self.render_snapshot()

    @work(group="store")
    async def _run_edit(self, entry: Entry, edit: EntryEdit) -> None:
        if edit.name != entry.name:
            position = self._position_of(entry)
            if position is None:
                return
            await self._synchronizer.update_name(position, edit.name)
            self.render_snapshot()

        new_score = coerce_score(edit.score)
        if new_score != entry.score:
            position = self._position_of(entry)
            if position is None:
                return
            await self._synchronizer.update_score(position, new_score)
            self.render_snapshot()

    def _position_of(self, entry: Entry) -> int | None:
        for position, candidate in enumerate(self._synchronizer.snapshot):
            if candidate is entry:
                return position
        return None

    # ------------------------------------------------------------------
    # Actions and events
    # ------------------------------------------------------------------

    def action_refresh(self) -> None:
        self._run_fetch()

    def action_remove_selected(self) -> None:
        if not self._synchronizer.edit_mode:
            return
        position = self._selected_position()
        if position is not None:
            self._run_remove(position)

    @on(Button.Pressed, "#add-btn")
    @on(Input.Submitted, "#new-name, #new-score")
    def _submit_new_entry(self) -> None:
        name = self.query_one("#new-name", Input).value
        raw_score = self.query_one("#new-score", Input).value
        self._run_add(name, raw_score)

    @on(DataTable.RowSelected, "#board-table")
    def _edit_selected(self, event: DataTable.RowSelected) -> None:
        if not self._synchronizer.edit_mode:
            return
        entry = self._synchronizer.snapshot[event.cursor_row]

        def apply(edit: EntryEdit | None) -> None:
            if edit is not None:
                self._run_edit(entry, edit)

        self.app.push_screen(EditEntryModal(entry.name, entry.score), apply)
