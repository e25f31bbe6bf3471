"""Command pattern implementation for composer actions."""

from abc import ABC, abstractmethod
from typing import Dict, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .composer import Composer


class ComposerCommand(ABC):
    """Base class for composer commands."""

    description = ""

    @abstractmethod
    def execute(self, composer: 'Composer') -> bool:
        """Execute the command.

        Args:
            composer: Composer instance

        Returns:
            True if the command modified the document
        """
        pass


class FormatCommand(ComposerCommand):
    """Base class for commands that restyle the selection."""

    done_message = ""

    def execute(self, composer: 'Composer') -> bool:
        changed = self._format(composer)
        if changed:
            composer.status_message = self.done_message
        return changed

    @abstractmethod
    def _format(self, composer: 'Composer') -> bool:
        """Apply the format; return True if the text changed."""
        pass


class ToggleBoldCommand(FormatCommand):
    description = "Bold"
    done_message = "Bold toggled"

    def _format(self, composer):
        return composer.toggle_bold()


class ToggleItalicCommand(FormatCommand):
    description = "Italic"
    done_message = "Italic toggled"

    def _format(self, composer):
        return composer.toggle_italic()


class StripFormattingCommand(FormatCommand):
    description = "Clear formatting"
    done_message = "Formatting removed"

    def _format(self, composer):
        return composer.strip_selection()


class UndoCommand(ComposerCommand):
    description = "Undo"

    def execute(self, composer):
        return composer.undo()


class RedoCommand(ComposerCommand):
    description = "Redo"

    def execute(self, composer):
        return composer.redo()


class PasteCommand(ComposerCommand):
    description = "Paste"

    def execute(self, composer):
        return composer.paste()


class SystemCommand(ComposerCommand):
    """Base class for commands that never modify the document."""

    def execute(self, composer: 'Composer') -> bool:
        self._execute_system(composer)
        return False

    @abstractmethod
    def _execute_system(self, composer: 'Composer'):
        pass


class CopyPostCommand(SystemCommand):
    description = "Copy post"

    def _execute_system(self, composer):
        composer.copy_post()


class SaveDraftCommand(SystemCommand):
    description = "Save draft"

    def _execute_system(self, composer):
        composer.save_draft()


class AnalyzeCommand(SystemCommand):
    description = "Analyze"

    def _execute_system(self, composer):
        result = composer.analyze()
        if result.word_count == 0:
            composer.status_message = "Nothing to analyze"
        else:
            composer.status_message = (
                f"Score {result.overall_score}/100, {result.word_count} words, "
                f"~{result.reading_time_sec}s read"
            )


class TogglePreviewCommand(SystemCommand):
    description = "Preview"

    def _execute_system(self, composer):
        composer.toggle_preview()
        composer.status_message = "Preview expanded" if composer.preview_expanded else "Preview folded"


class InsertTextCommand(ComposerCommand):
    """Insert fixed text (emoji, arrows, bullets) at the caret."""

    def __init__(self, text: str, description: str = ""):
        self.text = text
        self.description = description or f"Insert {text}"

    def execute(self, composer):
        return composer.insert_at_cursor(self.text)


class LoadTemplateCommand(ComposerCommand):
    def __init__(self, template_id: str):
        self.template_id = template_id
        self.description = f"Template: {template_id}"

    def execute(self, composer):
        composer.load_template(self.template_id)
        return True


class CommandRegistry:
    """Registry for mapping key chords (``"ctrl+b"``) to commands."""

    def __init__(self):
        self._commands: Dict[str, ComposerCommand] = {}
        self._setup_default_commands()

    def _setup_default_commands(self):
        """Set up the default command mappings."""
        # Style toggles
        self.register('ctrl+b', ToggleBoldCommand())
        # ctrl+i arrives as Tab in most terminals
        self.register('ctrl+t', ToggleItalicCommand())
        self.register('ctrl+e', StripFormattingCommand())
        # Undo/redo
        self.register('ctrl+z', UndoCommand())
        self.register('ctrl+y', RedoCommand())
        self.register('ctrl+shift+z', RedoCommand())
        # Inserts
        self.register('ctrl+l', InsertTextCommand('• ', 'Bullet'))
        self.register('ctrl+r', InsertTextCommand('→ ', 'Arrow'))
        self.register('f4', PasteCommand())
        # System commands
        self.register('ctrl+k', CopyPostCommand())
        self.register('ctrl+s', SaveDraftCommand())
        self.register('f2', AnalyzeCommand())
        self.register('f3', TogglePreviewCommand())

    def register(self, chord: str, command: ComposerCommand):
        """Register a command for a key chord."""
        self._commands[chord.lower()] = command

    def get_command(self, chord: str) -> Optional[ComposerCommand]:
        return self._commands.get(chord.lower())

    def chords(self) -> Dict[str, ComposerCommand]:
        return dict(self._commands)

    def execute(self, composer: 'Composer', chord: str) -> bool:
        """Execute the command bound to ``chord``.

        Returns:
            True if the document was modified
        """
        command = self.get_command(chord)
        if command is None:
            return False
        return command.execute(composer)
