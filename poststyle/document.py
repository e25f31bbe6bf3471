"""The three-field post document."""

from __future__ import annotations

from dataclasses import asdict, dataclass, replace
from typing import Any, Dict, Mapping, Tuple

from .constants import ComposerConstants

FIELDS = ComposerConstants.FIELDS


@dataclass(frozen=True)
class PostDocument:
    hook: str = ""
    content: str = ""
    cta: str = ""

    def get(self, field_name: str) -> str:
        if field_name not in FIELDS:
            raise ValueError(f"Unknown field: {field_name!r}")
        return getattr(self, field_name)

    def replace_field(self, field_name: str, value: str) -> "PostDocument":
        if field_name not in FIELDS:
            raise ValueError(f"Unknown field: {field_name!r}")
        return replace(self, **{field_name: value})

    @property
    def is_empty(self) -> bool:
        return not any(self.get(name).strip() for name in FIELDS)

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PostDocument":
        """Build a document from a mapping; missing fields are empty.

        Raises:
            ValueError: If a field is present but not a string.
        """
        values = {}
        for name in FIELDS:
            value = data.get(name, "")
            if not isinstance(value, str):
                raise ValueError(f"Field {name!r} must be a string, got {type(value).__name__}")
            values[name] = value
        return cls(**values)


@dataclass(frozen=True)
class CharacterBudget:
    count: int
    limit: int

    @property
    def remaining(self) -> int:
        return self.limit - self.count

    @property
    def over_limit(self) -> bool:
        return self.count > self.limit

    @property
    def percentage(self) -> float:
        if self.limit <= 0:
            return 100.0
        return min(self.count / self.limit * 100, 100.0)


def merged_text(document: PostDocument) -> str:
    """The post as it will be published: non-blank fields separated by a blank line."""
    parts = [document.get(name) for name in FIELDS if document.get(name).strip()]
    return ComposerConstants.PARAGRAPH_SEPARATOR.join(parts)


def character_budget(document: PostDocument, max_chars: int = ComposerConstants.MAX_CHARS) -> CharacterBudget:
    # Styled glyphs are one code point each, the unit the budget is counted in
    return CharacterBudget(count=len(merged_text(document)), limit=max_chars)


def preview_text(document: PostDocument, expanded: bool = False) -> Tuple[str, bool]:
    """The post as a feed shows it before "see more" is clicked.

    The fold keeps at most the first ``PREVIEW_MAX_LINES`` lines, then at
    most ``PREVIEW_MAX_CHARS`` code points of those.

    Returns:
        ``(text, truncated)``; ``truncated`` is True when part of the post
        is hidden behind the fold.
    """
    full = merged_text(document)
    if expanded:
        return full, False
    lines = full.split("\n")
    shown = "\n".join(lines[:ComposerConstants.PREVIEW_MAX_LINES])
    shown = shown[:ComposerConstants.PREVIEW_MAX_CHARS]
    return shown, shown != full
