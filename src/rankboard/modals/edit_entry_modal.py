"""EditEntryModal - edit the name and score of one leaderboard row."""

from dataclasses import dataclass
from typing import ClassVar

from textual import on
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, HorizontalGroup, VerticalGroup
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Label, Static


@dataclass(frozen=True)
class EntryEdit:
    """Values typed into the modal. ``score`` is raw text."""

    name: str
    score: str


class EditEntryModal(ModalScreen[EntryEdit | None]):
    """Modal for editing a row.

    Returns the edited values on save, None on cancel.

    Keyboard Navigation:
    - Tab/Shift+Tab: Navigate between fields
    - Enter: Save
    - Escape: Cancel
    """

    CSS_PATH = "../styles/modal_base.tcss"

    DEFAULT_CSS = """
    EditEntryModal {
        align: center middle;
        background: black 50%;
    }
    """

    AUTO_FOCUS = "#edit-name"

    BINDINGS: ClassVar[list[Binding]] = [
        Binding("escape", "cancel", "Cancel", show=False),
    ]

    def __init__(self, name: str, score: int) -> None:
        super().__init__()
        self._entry_name = name
        self._entry_score = score

    def compose(self) -> ComposeResult:
        with VerticalGroup(id="container"):
            yield Static("Edit Entry", classes="modal-title")

            with Horizontal(classes="form-row"):
                yield Label("Name:", classes="form-label")
                yield Input(value=self._entry_name, id="edit-name")

            with Horizontal(classes="form-row"):
                yield Label("Score:", classes="form-label")
                yield Input(value=str(self._entry_score), id="edit-score")

            with HorizontalGroup(id="buttons"):
                yield Button("Cancel", id="cancel-btn")
                yield Button("Save", id="save-btn", variant="primary")

    @on(Button.Pressed, "#save-btn")
    @on(Input.Submitted)
    def _save(self) -> None:
        self.dismiss(
            EntryEdit(
                name=self.query_one("#edit-name", Input).value,
                score=self.query_one("#edit-score", Input).value,
            )
        )

    @on(Button.Pressed, "#cancel-btn")
    def action_cancel(self) -> None:
        self.dismiss(None)
