"""Toolkit-independent composer controller.

The composer ties the history, the active field and its selection to the
toolbar actions. A front end forwards typing with ``update_field``, keeps
``select`` in sync with the widget's selection, and redraws from
``document`` and ``selection`` after each action.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional, Tuple

from . import unicode_style
from .analytics import PostAnalytics, analyze_post
from .clipboard import ClipboardError, ClipboardManager
from .constants import ComposerConstants
from .document import CharacterBudget, PostDocument, character_budget, merged_text, preview_text
from .drafts import DraftStore
from .history import HistoryManager, Scheduler
from .settings_persistence import ComposerSettings
from .templates import get_template

logger = logging.getLogger(__name__)


class Composer:
    """Edits a post through the history manager."""

    def __init__(
        self,
        settings: Optional[ComposerSettings] = None,
        *,
        scheduler: Optional[Scheduler] = None,
        draft_store: Optional[DraftStore] = None,
        clipboard: Optional[ClipboardManager] = None,
        initial: Optional[PostDocument] = None,
    ):
        self.settings = settings or ComposerSettings()
        self.history = HistoryManager(
            initial,
            max_history=self.settings.max_history,
            debounce_delay=self.settings.debounce_delay,
            scheduler=scheduler,
        )
        self.draft_store = draft_store
        self.clipboard = clipboard or ClipboardManager()
        self.active_field = ComposerConstants.FIELDS[0]
        self._selection: Tuple[int, int] = (0, 0)
        self.status_message: Optional[str] = None
        self.preview_expanded = False
        self._pending_template: Optional[str] = None

    @property
    def document(self) -> PostDocument:
        return self.history.document

    @property
    def selection(self) -> Tuple[int, int]:
        return self._selection

    @property
    def has_selection(self) -> bool:
        start, end = self._selection
        return start != end

    @property
    def selected_text(self) -> str:
        start, end = self._selection
        return self._active_value()[start:end]

    def set_scheduler(self, scheduler: Scheduler) -> None:
        """Switch the debounce timer source, e.g. to the UI event loop."""
        self.history.set_scheduler(scheduler)

    def focus(self, field_name: str) -> None:
        if field_name not in ComposerConstants.FIELDS:
            raise ValueError(f"Unknown field: {field_name!r}")
        if field_name != self.active_field:
            self.active_field = field_name
            self._selection = (0, 0)

    def select(self, start: int, end: int) -> None:
        """Select ``[start, end)`` of the active field, in code points."""
        length = len(self._active_value())
        start = max(0, min(start, length))
        end = max(0, min(end, length))
        self._selection = (min(start, end), max(start, end))

    def update_field(self, field_name: str, value: str) -> None:
        """Record text typed into a field."""
        if value == self.document.get(field_name):
            return
        self._pending_template = None
        self.history.set_field(field_name, value)
        if field_name == self.active_field:
            self.select(*self._selection)

    def toggle_bold(self) -> bool:
        return self._apply_format(unicode_style.toggle_bold)

    def toggle_italic(self) -> bool:
        return self._apply_format(unicode_style.toggle_italic)

    def strip_selection(self) -> bool:
        return self._apply_format(unicode_style.strip_formatting)

    def insert_at_cursor(self, text: str) -> bool:
        """Replace the selection (or insert at the caret) and move the caret past ``text``."""
        if not text:
            return False
        start, end = self._selection
        value = self._active_value()
        self.history.set_field(self.active_field, value[:start] + text + value[end:])
        caret = start + len(text)
        self._selection = (caret, caret)
        return True

    def paste(self) -> bool:
        """Insert the system clipboard at the caret."""
        try:
            text = self.clipboard.paste_text()
        except ClipboardError as e:
            self.status_message = f"Clipboard unavailable: {e}"
            return False
        if not text:
            self.status_message = "Clipboard is empty"
            return False
        return self.insert_at_cursor(text)

    def choose_template(self, template_id: str) -> bool:
        """Load a template picked by the user.

        A template that would overwrite a non-empty post must be picked twice
        in a row; the first pick only asks for confirmation.

        Returns:
            True if the template was loaded.
        """
        template = get_template(template_id)
        needs_confirmation = template_id != "empty" and not self.document.is_empty
        if needs_confirmation and self._pending_template != template_id:
            self._pending_template = template_id
            self.status_message = ComposerConstants.CONFIRM_TEMPLATE_MESSAGE.format(template.name)
            return False
        self.load_template(template_id)
        return True

    def load_template(self, template_id: str) -> None:
        template = get_template(template_id)
        self._pending_template = None
        self.history.set_all(template.document())
        self._selection = (0, 0)
        self.status_message = f"Template loaded: {template.name}"

    def undo(self) -> bool:
        if self.history.undo():
            self.select(*self._selection)
            self.status_message = "Undone"
            return True
        self.status_message = "Nothing to undo"
        return False

    def redo(self) -> bool:
        if self.history.redo():
            self.select(*self._selection)
            self.status_message = "Redone"
            return True
        self.status_message = "Nothing to redo"
        return False

    def analyze(self) -> PostAnalytics:
        doc = self.document
        return analyze_post(doc.hook, doc.content, doc.cta)

    def preview(self) -> Tuple[str, bool]:
        return preview_text(self.document, self.preview_expanded)

    def toggle_preview(self) -> None:
        self.preview_expanded = not self.preview_expanded

    def budget(self) -> CharacterBudget:
        return character_budget(self.document, self.settings.max_chars)

    def copy_post(self) -> bool:
        """Copy the merged post to the clipboard, refusing empty or over-long posts."""
        budget = self.budget()
        if budget.count == 0:
            self.status_message = "Nothing to copy"
            return False
        if budget.over_limit:
            self.status_message = ComposerConstants.OVER_LIMIT_MESSAGE.format(-budget.remaining)
            return False
        try:
            self.clipboard.copy_text(merged_text(self.document))
        except ClipboardError as e:
            self.status_message = f"Clipboard unavailable: {e}"
            return False
        self.status_message = "Post copied"
        return True

    def save_draft(self) -> bool:
        if self.draft_store is None:
            self.status_message = "Drafts are disabled"
            return False
        self.history.commit()
        if self.draft_store.save(self.document):
            self.status_message = "Draft saved"
            return True
        self.status_message = "Could not save draft"
        return False

    def restore_draft(self) -> bool:
        """Replace the document with the stored draft as one undo step."""
        if self.draft_store is None:
            return False
        draft = self.draft_store.load()
        if draft is None or draft == self.document:
            return False
        self.history.set_all(draft)
        self._selection = (0, 0)
        self.status_message = "Draft restored"
        logger.info("Restored draft from %s", self.draft_store.path)
        return True

    def _active_value(self) -> str:
        return self.document.get(self.active_field)

    def _apply_format(self, formatter: Callable[[str], str]) -> bool:
        if not self.has_selection:
            self.status_message = ComposerConstants.NO_SELECTION_MESSAGE
            return False
        start, end = self._selection
        value = self._active_value()
        formatted = formatter(value[start:end])
        # The styled span stays selected so the next toggle applies to it
        self._selection = (start, start + len(formatted))
        if formatted == value[start:end]:
            return False
        self.history.set_field(self.active_field, value[:start] + formatted + value[end:])
        return True
