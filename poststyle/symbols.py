"""Special characters offered by the insert menu."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple


@dataclass(frozen=True)
class SymbolCategory:
    name: str
    chars: Tuple[str, ...]


SYMBOL_CATEGORIES: Tuple[SymbolCategory, ...] = (
    SymbolCategory("Arrows", ("→", "←", "↑", "↓", "⇒", "⇐", "↳", "⟶")),
    SymbolCategory("Bullets", ("•", "◦", "‣", "▸", "▹", "●", "○", "■", "□", "◆", "◇")),
    SymbolCategory("Checks", ("✓", "✔", "✗", "✘", "☑", "☐")),
    SymbolCategory("Numbers", tuple(chr(cp) for cp in range(0x2460, 0x246A))),
    SymbolCategory("Lines", ("─", "━", "═", "│", "┃", "·", "|")),
    SymbolCategory("Emoji", (
        "\U0001F449", "\U0001F447", "\U0001F680", "\U0001F4A1", "✅",
        "\U0001F525", "\U0001F4C8", "\U0001F3AF", "\U0001F4AC", "\U0001F64C",
    )),
)


def iter_symbols() -> Iterator[Tuple[str, str]]:
    """Yield ``(category name, character)`` pairs in menu order."""
    for category in SYMBOL_CATEGORIES:
        for char in category.chars:
            yield category.name, char


def get_category(name: str) -> SymbolCategory:
    """Look up a category by name.

    Raises:
        KeyError: If no category has that name.
    """
    for category in SYMBOL_CATEGORIES:
        if category.name == name:
            return category
    raise KeyError(f"Unknown symbol category: {name!r}")
