"""Unicode lookalike styling for plain-text posts.

Social networks strip markup from posts, but they keep any Unicode
character. The sans-serif family of the Mathematical Alphanumeric Symbols
block has bold, italic and bold-italic copies of the Latin alphabet (and a
bold copy of the digits), so text styled with those glyphs still looks bold
or italic after it is pasted into a plain-text field.

Style variants and their first code points:

    Normal       A-Z U+0041    a-z U+0061    0-9 U+0030
    Bold         A-Z U+1D5D4   a-z U+1D5EE   0-9 U+1D7EC
    Italic       A-Z U+1D608   a-z U+1D622   (no digits)
    BoldItalic   A-Z U+1D63C   a-z U+1D656   (no digits)

Every function works on code points (Python ``str`` items), runs in a
single pass and never fails: characters without a mapping are passed
through unchanged.
"""

from __future__ import annotations

import string
from enum import Enum
from typing import Dict, Mapping, Optional, Tuple


class Style(Enum):
    NORMAL = "normal"
    BOLD = "bold"
    ITALIC = "italic"
    BOLD_ITALIC = "bold_italic"


def _linear_map(start_cp: int, alphabet: str) -> Dict[str, str]:
    """Map each character of ``alphabet`` to consecutive code points."""
    return {char: chr(start_cp + i) for i, char in enumerate(alphabet)}


def _build_encode_tables() -> Dict[Style, Dict[str, str]]:
    upper, lower, digits = string.ascii_uppercase, string.ascii_lowercase, string.digits
    normal = {char: char for char in upper + lower + digits}
    bold = {
        **_linear_map(0x1D5D4, upper),
        **_linear_map(0x1D5EE, lower),
        **_linear_map(0x1D7EC, digits),
    }
    italic = {**_linear_map(0x1D608, upper), **_linear_map(0x1D622, lower)}
    bold_italic = {**_linear_map(0x1D63C, upper), **_linear_map(0x1D656, lower)}
    return {
        Style.NORMAL: normal,
        Style.BOLD: bold,
        Style.ITALIC: italic,
        Style.BOLD_ITALIC: bold_italic,
    }


# Style -> {plain character: glyph}
_ENCODE: Dict[Style, Dict[str, str]] = _build_encode_tables()

# Glyph -> (plain character, style); plain letters and digits included
_DECODE: Dict[str, Tuple[str, Style]] = {
    glyph: (plain, style)
    for style, table in _ENCODE.items()
    for plain, glyph in table.items()
}


_ADD_BOLD = {Style.NORMAL: Style.BOLD, Style.ITALIC: Style.BOLD_ITALIC}
_ADD_ITALIC = {Style.NORMAL: Style.ITALIC, Style.BOLD: Style.BOLD_ITALIC}
_DROP_BOLD = {Style.BOLD: Style.NORMAL, Style.BOLD_ITALIC: Style.ITALIC}
_DROP_ITALIC = {Style.ITALIC: Style.NORMAL, Style.BOLD_ITALIC: Style.BOLD}
_DROP_ALL = {
    Style.BOLD: Style.NORMAL,
    Style.ITALIC: Style.NORMAL,
    Style.BOLD_ITALIC: Style.NORMAL,
}

_BOLD_STYLES = (Style.BOLD, Style.BOLD_ITALIC)
_ITALIC_STYLES = (Style.ITALIC, Style.BOLD_ITALIC)


# Inclusive code point ranges treated as emoji by strip_formatting
EMOJI_RANGES: Tuple[Tuple[int, int], ...] = (
    (0x2600, 0x26FF),    # Miscellaneous symbols
    (0x2700, 0x27BF),    # Dingbats
    (0x2B1B, 0x2B1C),    # Large squares
    (0x2B50, 0x2B55),    # Stars and circles
    (0x1F000, 0x1F02F),  # Mahjong tiles
    (0x1F0A0, 0x1F0FF),  # Playing cards
    (0x1F100, 0x1F1FF),  # Enclosed alphanumerics, regional indicator flags
    (0x1F200, 0x1F2FF),  # Enclosed ideographic supplement
    (0x1F300, 0x1F5FF),  # Symbols and pictographs, skin tone modifiers
    (0x1F600, 0x1F64F),  # Emoticons
    (0x1F650, 0x1F67F),  # Ornamental dingbats
    (0x1F680, 0x1F6FF),  # Transport and map symbols
    (0x1F780, 0x1F7FF),  # Geometric shapes extended
    (0x1F900, 0x1F9FF),  # Supplemental symbols and pictographs
    (0x1FA00, 0x1FA6F),  # Chess symbols
    (0x1FA70, 0x1FAFF),  # Symbols and pictographs extended-A
)

# Single symbols outside those blocks that have an emoji presentation.
# Plain arrows such as U+2192 stay out so arrow bullets survive a strip.
EMOJI_CODE_POINTS = frozenset(
    [0x203C, 0x2049]
    + list(range(0x2194, 0x219A)) + [0x21A9, 0x21AA]
    + [0x231A, 0x231B, 0x2328, 0x23CF] + list(range(0x23E9, 0x23F4)) + [0x23F8, 0x23F9, 0x23FA]
    + [0x24C2, 0x25B6, 0x25C0] + list(range(0x25FB, 0x25FF))
    + [0x2934, 0x2935, 0x2B05, 0x2B06, 0x2B07]
    + [0x3030, 0x303D, 0x3297, 0x3299]
)

_VARIATION_SELECTORS = frozenset("\ufe0e\ufe0f")
_KEYCAP_BASES = frozenset(string.digits + "#*")
_COMBINING_KEYCAP = "\u20e3"
_ZERO_WIDTH_JOINER = "\u200d"
_TAG_RANGE = (0xE0020, 0xE007F)  # Subdivision flag tags


def style_of(char: str) -> Optional[Style]:
    """Return the style of a single character, or None if it is not stylable."""
    entry = _DECODE.get(char)
    return entry[1] if entry else None


def is_emoji(char: str) -> bool:
    """True if the character lies in an emoji range or is a listed emoji symbol."""
    if len(char) != 1:
        return False
    cp = ord(char)
    return cp in EMOJI_CODE_POINTS or any(lo <= cp <= hi for lo, hi in EMOJI_RANGES)


def _glyph(plain: str, style: Style, default: str) -> str:
    glyph = _ENCODE[style].get(plain)
    if glyph is not None:
        return glyph
    # Digits only exist in bold; a bold-italic digit stays bold
    if style is Style.BOLD_ITALIC:
        return _ENCODE[Style.BOLD].get(plain, default)
    return default


def _restyle(text: str, transitions: Mapping[Style, Style]) -> str:
    result = []
    for char in text:
        entry = _DECODE.get(char)
        if entry is None:
            result.append(char)
            continue
        plain, style = entry
        target = transitions.get(style)
        if target is None:
            result.append(char)
        else:
            result.append(_glyph(plain, target, char))
    return "".join(result)


def to_bold(text: str) -> str:
    """Make every letter and digit bold, composing with italic where present.

    Italic letters become bold-italic. Characters that are already bold or
    bold-italic, and characters with no bold form, are left alone.
    """
    return _restyle(text, _ADD_BOLD)


def to_italic(text: str) -> str:
    """Make every letter italic, composing with bold where present.

    Digits have no italic glyph and are returned unchanged, plain or bold.
    """
    return _restyle(text, _ADD_ITALIC)


def remove_bold(text: str) -> str:
    """Demote bold to plain and bold-italic to italic."""
    return _restyle(text, _DROP_BOLD)


def remove_italic(text: str) -> str:
    """Demote italic to plain and bold-italic to bold."""
    return _restyle(text, _DROP_ITALIC)


def to_plain(text: str) -> str:
    """Demote every styled character to its plain form, keeping emoji."""
    return _restyle(text, _DROP_ALL)


def strip_formatting(text: str) -> str:
    """Remove all styling and all emoji from ``text``.

    Variation selectors, skin tone modifiers, flag tags and zero-width
    joiners that belong to a removed emoji go with it, and keycap sequences
    such as ``1`` + U+FE0F + U+20E3 are removed whole. Unlike
    ``remove_bold``/``remove_italic`` this is a clean slate, not the undo of
    one style.

    Args:
        text: Text to clean.

    Returns:
        Plain text with no mathematical glyphs and no emoji.
    """
    result = []
    after_emoji = False
    last = len(text) - 1
    i = 0
    while i <= last:
        char = text[i]
        keycap = _keycap_length(text, i)
        if keycap:
            after_emoji = True
            i += keycap
            continue
        i += 1
        if is_emoji(char):
            after_emoji = True
            continue
        if after_emoji:
            if char in _VARIATION_SELECTORS or _TAG_RANGE[0] <= ord(char) <= _TAG_RANGE[1]:
                continue
            if char == _ZERO_WIDTH_JOINER and i <= last and is_emoji(text[i]):
                continue
        after_emoji = False
        result.append(to_plain(char))
    return "".join(result)


def _keycap_length(text: str, start: int) -> int:
    """Length of the keycap sequence at ``start``, or 0 if there is none."""
    if text[start] not in _KEYCAP_BASES:
        return 0
    end = start + 1
    if end < len(text) and text[end] in _VARIATION_SELECTORS:
        end += 1
    if end < len(text) and text[end] == _COMBINING_KEYCAP:
        return end + 1 - start
    return 0


def is_selection_bold(text: str) -> bool:
    """True if every stylable character of ``text`` is bold or bold-italic.

    Punctuation, whitespace and emoji are ignored. A selection with no
    stylable characters is not bold.
    """
    styles = [style for style in map(style_of, text) if style is not None]
    return bool(styles) and all(style in _BOLD_STYLES for style in styles)


def is_selection_italic(text: str) -> bool:
    """True if every letter of ``text`` is italic or bold-italic.

    Only letters count: digits have no italic form and never decide the
    outcome.
    """
    styles = [
        style_of(char)
        for char in text
        if style_of(char) is not None and to_plain(char) not in string.digits
    ]
    return bool(styles) and all(style in _ITALIC_STYLES for style in styles)


def toggle_bold(text: str) -> str:
    """Bold button behaviour: un-bold a fully bold selection, otherwise bold it."""
    if is_selection_bold(text):
        return remove_bold(text)
    return to_bold(text)


def toggle_italic(text: str) -> str:
    """Italic button behaviour, symmetric to ``toggle_bold``."""
    if is_selection_italic(text):
        return remove_italic(text)
    return to_italic(text)
