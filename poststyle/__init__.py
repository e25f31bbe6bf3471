"""poststyle - a social media post composer with Unicode text styling."""

from .document import PostDocument, merged_text
from .history import HistoryManager, ManualScheduler
from .unicode_style import (
    Style,
    is_selection_bold,
    is_selection_italic,
    remove_bold,
    remove_italic,
    strip_formatting,
    to_bold,
    to_italic,
)

__all__ = [
    'PostDocument',
    'merged_text',
    'HistoryManager',
    'ManualScheduler',
    'Style',
    'to_bold',
    'to_italic',
    'remove_bold',
    'remove_italic',
    'strip_formatting',
    'is_selection_bold',
    'is_selection_italic',
]
