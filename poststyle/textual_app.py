"""Textual front end for the composer."""

from __future__ import annotations

from typing import Callable, Dict, Optional, Tuple

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, VerticalScroll
from textual.timer import Timer
from textual.widgets import Footer, Header, Label, Select, Static, TextArea
from textual.widgets.text_area import Selection

from .commands import CommandRegistry, InsertTextCommand
from .composer import Composer
from .constants import ComposerConstants
from .symbols import iter_symbols
from .templates import TEMPLATES

Location = Tuple[int, int]

_FIELD_PREFIX = "field-"


def location_to_offset(text: str, location: Location) -> int:
    """Convert a TextArea (row, column) location to a code point offset."""
    row, column = location
    lines = text.split("\n")
    if row >= len(lines):
        return len(text)
    return sum(len(line) + 1 for line in lines[:row]) + min(column, len(lines[row]))


def offset_to_location(text: str, offset: int) -> Location:
    """Convert a code point offset to a TextArea (row, column) location."""
    before = text[:offset]
    row = before.count("\n")
    return row, len(before) - (before.rfind("\n") + 1)


class _TimerHandle:
    def __init__(self, timer: Timer):
        self._timer = timer

    def cancel(self) -> None:
        self._timer.stop()


class TextualScheduler:
    """Runs history debounce timers on the app's event loop."""

    def __init__(self, app: App):
        self._app = app

    def schedule(self, delay: float, callback: Callable[[], None]) -> _TimerHandle:
        return _TimerHandle(self._app.set_timer(delay, callback))


class PoststyleApp(App):
    """Three-field post composer."""

    TITLE = "poststyle"

    CSS = """
    TextArea {
        height: auto;
        min-height: 4;
        max-height: 16;
        border: round $primary-darken-2;
    }
    TextArea:focus {
        border: round $accent;
    }
    #field-content {
        min-height: 8;
    }
    Label {
        margin: 1 0 0 1;
        color: $text-muted;
    }
    #menus {
        height: auto;
    }
    #menus Select {
        width: 1fr;
    }
    #preview {
        margin: 0 1;
        padding: 1 2;
        border: round $primary-darken-3;
    }
    #status {
        dock: bottom;
        height: 1;
        padding: 0 1;
        background: $boost;
    }
    """

    # Registry chords take priority over TextArea's own bindings
    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit", priority=True),
    ] + [
        Binding(chord, f"run_command('{chord}')", command.description, priority=True)
        for chord, command in CommandRegistry().chords().items()
    ]

    def __init__(self, composer: Composer, registry: Optional[CommandRegistry] = None):
        super().__init__()
        self.composer = composer
        self.registry = registry or CommandRegistry()
        self._areas: Dict[str, TextArea] = {}

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="menus"):
            yield Select(
                [(template.name, template.id) for template in TEMPLATES],
                prompt="Template",
                id="template",
            )
            yield Select(
                [(f"{category}  {char}", char) for category, char in iter_symbols()],
                prompt="Insert symbol",
                id="symbol",
            )
        with VerticalScroll():
            for name in ComposerConstants.FIELDS:
                yield Label(ComposerConstants.FIELD_LABELS[name])
                area = TextArea(self.composer.document.get(name), id=_FIELD_PREFIX + name)
                area.show_line_numbers = False
                self._areas[name] = area
                yield area
            yield Label("Preview")
            yield Static(id="preview", markup=False)
        yield Static(id="status")
        yield Footer()

    def on_mount(self) -> None:
        self.composer.set_scheduler(TextualScheduler(self))
        self._areas[self.composer.active_field].focus()
        self._update_preview()
        self._update_status()

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        name = self._field_name(event.text_area)
        if name is None:
            return
        text = event.text_area.text
        # Echo of a programmatic load_text
        if text == self.composer.document.get(name):
            return
        self.composer.focus(name)
        self.composer.update_field(name, text)
        self._sync_selection(event.text_area)
        self._update_preview()
        self._update_status()

    def on_text_area_selection_changed(self, event: TextArea.SelectionChanged) -> None:
        name = self._field_name(event.text_area)
        if name is None:
            return
        self.composer.focus(name)
        self._sync_selection(event.text_area)

    def on_select_changed(self, event: Select.Changed) -> None:
        if event.value is Select.BLANK:
            return
        if event.select.id == "template":
            self.composer.choose_template(str(event.value))
        elif event.select.id == "symbol":
            InsertTextCommand(str(event.value)).execute(self.composer)
        # Back to the prompt so the same entry can be picked again
        event.select.value = Select.BLANK
        self._refresh_fields()

    def action_run_command(self, chord: str) -> None:
        focused = self.focused
        if isinstance(focused, TextArea) and self._field_name(focused):
            self.composer.focus(self._field_name(focused))
            self._sync_selection(focused)
        self.registry.execute(self.composer, chord)
        self._refresh_fields()

    async def action_quit(self) -> None:
        store = self.composer.draft_store
        if store is not None:
            if self.composer.document.is_empty:
                store.delete()
            else:
                self.composer.save_draft()
        self.exit()

    def _field_name(self, area: TextArea) -> Optional[str]:
        if area.id and area.id.startswith(_FIELD_PREFIX):
            return area.id[len(_FIELD_PREFIX):]
        return None

    def _sync_selection(self, area: TextArea) -> None:
        text = area.text
        start = location_to_offset(text, area.selection.start)
        end = location_to_offset(text, area.selection.end)
        self.composer.select(start, end)

    def _refresh_fields(self) -> None:
        """Push the composer's document and selection back into the widgets."""
        document = self.composer.document
        for name, area in self._areas.items():
            value = document.get(name)
            if area.text != value:
                area.load_text(value)
        active = self._areas[self.composer.active_field]
        value = document.get(self.composer.active_field)
        start, end = self.composer.selection
        active.selection = Selection(offset_to_location(value, start), offset_to_location(value, end))
        active.focus()
        self._update_preview()
        self._update_status()

    def _update_preview(self) -> None:
        text, truncated = self.composer.preview()
        if truncated:
            text += ComposerConstants.SEE_MORE_LABEL
        self.query_one("#preview", Static).update(text)

    def _update_status(self) -> None:
        budget = self.composer.budget()
        parts = [f"{budget.count} / {budget.limit}"]
        if budget.over_limit:
            parts.append(f"{-budget.remaining} over")
        parts.append("undo" if self.composer.history.can_undo else "")
        parts.append("redo" if self.composer.history.can_redo else "")
        if self.composer.status_message:
            parts.append(self.composer.status_message)
        self.query_one("#status", Static).update("  ".join(p for p in parts if p))


def run(composer: Composer) -> None:
    PoststyleApp(composer).run()
