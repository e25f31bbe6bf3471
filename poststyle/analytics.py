"""Heuristic quality metrics for a post draft."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from typing import List

from .constants import ComposerConstants
from .document import PostDocument, merged_text
from .unicode_style import to_plain

POWER_WORDS = (
    "secret", "mistake", "why", "how", "trick", "strategy", "important",
    "never", "always", "instantly", "simple", "surprising", "incredible",
    "change", "transform", "discover", "learn", "growth", "success",
    "fail", "lesson", "truth", "myth", "stop", "warning",
    "geheim", "fehler", "warum", "wie", "strategie", "wichtig",
    "nie", "immer", "sofort", "einfach", "überraschend", "unglaublich",
    "erstaunlich", "verändern", "transformieren", "entdecken", "lernen",
    "wachstum", "erfolg", "scheitern", "lektion", "erkenntnis",
    "unpopulär", "kontrovers", "wahrheit", "mythos", "achtung",
)

_SENTENCE_END = re.compile(r"[.!?]+")
_PARAGRAPH_BREAK = re.compile(r"\n\s*\n")


@dataclass(frozen=True)
class HookScore:
    score: int = 0
    has_question: bool = False
    has_number: bool = False
    has_power_word: bool = False
    is_short: bool = True


@dataclass(frozen=True)
class PostAnalytics:
    word_count: int = 0
    reading_time_sec: int = 0
    avg_sentence_length: int = 0
    emoji_count: int = 0
    paragraph_count: int = 0
    avg_paragraph_lines: float = 0.0
    hook_score: HookScore = field(default_factory=HookScore)
    overall_score: int = 0
    suggestions: List[str] = field(default_factory=list)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


# Emoji counted for the suggestions; strip_formatting removes a wider set
_COUNTED_EMOJI_RANGES = (
    (0x1F600, 0x1F64F),
    (0x1F300, 0x1F5FF),
    (0x1F680, 0x1F6FF),
    (0x1F1E0, 0x1F1FF),
    (0x2600, 0x26FF),
    (0x2700, 0x27BF),
    (0x1F900, 0x1F9FF),
    (0x1FA00, 0x1FA6F),
    (0x1FA70, 0x1FAFF),
)


def count_emojis(text: str) -> int:
    return sum(
        1 for char in text
        if any(lo <= ord(char) <= hi for lo, hi in _COUNTED_EMOJI_RANGES)
    )


def analyze_hook(hook: str) -> HookScore:
    # Styled glyphs are scored like the letters and digits they stand for
    plain = to_plain(hook)
    lower = plain.lower()
    has_question = "?" in plain
    has_number = any(char.isdigit() for char in plain)
    has_power_word = any(word in lower for word in POWER_WORDS)
    lines = [line for line in plain.split("\n") if line.strip()]
    is_short = len(lines) <= 3 and len(plain) <= 200

    score = 25 * sum((has_question, has_number, has_power_word, is_short))
    return HookScore(
        score=score,
        has_question=has_question,
        has_number=has_number,
        has_power_word=has_power_word,
        is_short=is_short,
    )


def _sentence_length_points(avg_sentence_length: int) -> float:
    if avg_sentence_length <= 0:
        return 0
    if 8 <= avg_sentence_length <= 15:
        return 100
    if avg_sentence_length < 8:
        return 70
    if avg_sentence_length <= 20:
        return 60
    return 30


def _paragraph_points(avg_paragraph_lines: float) -> float:
    if avg_paragraph_lines <= 0:
        return 0
    if avg_paragraph_lines <= 3:
        return 100
    if avg_paragraph_lines <= 5:
        return 60
    return 30


def _word_count_points(word_count: int) -> float:
    if 100 <= word_count <= 250:
        return 100
    if 50 <= word_count < 100:
        return 60
    if 250 < word_count <= 400:
        return 70
    if word_count < 50:
        return 30
    return 40


def _cta_points(cta: str) -> float:
    if not cta.strip():
        return 0
    return 100 if "?" in cta else 70


def build_suggestions(
    word_count: int,
    avg_sentence_length: int,
    avg_paragraph_lines: float,
    emoji_count: int,
    hook_score: HookScore,
    cta: str,
) -> List[str]:
    suggestions = []

    if hook_score.score < 75:
        if not hook_score.has_question:
            suggestions.append("Open the hook with a clear question to invite comments.")
        if not hook_score.has_number:
            suggestions.append('Put a concrete number in the hook (e.g. "3 lessons") so the value is obvious.')
        if not hook_score.has_power_word:
            suggestions.append('Use a strong word such as "mistake", "strategy" or "truth" to spark curiosity.')

    if word_count < 100:
        suggestions.append("Add a short example or mini story to get closer to 100-250 words.")
    elif word_count > 250:
        suggestions.append("Cut the text down to its strongest points so readers reach the call to action.")

    if avg_sentence_length > 15:
        suggestions.append("Split long sentences into shorter statements (8-15 words) to make the post scannable.")

    if avg_paragraph_lines > 3:
        suggestions.append("Use more paragraphs of 1-3 lines for better reading on mobile.")

    if emoji_count == 0:
        suggestions.append("Add 1-3 fitting emoji as visual anchors for key points.")
    elif emoji_count > 8:
        suggestions.append("Keep to at most 8 emoji so the post stays clear and professional.")

    if not cta.strip():
        suggestions.append('End with a concrete call to action, e.g. "What do you think?".')
    elif "?" not in cta:
        suggestions.append("Phrase the call to action as a question to get more replies.")

    if not suggestions:
        suggestions.append("Strong post: try two hook variants next and compare reach and comment rate.")

    return suggestions[:ComposerConstants.MAX_SUGGESTIONS]


def analyze_post(hook: str, content: str, cta: str) -> PostAnalytics:
    """Score a draft on hook strength, length, structure and call to action.

    Args:
        hook: Opening lines of the post.
        content: Main body.
        cta: Call to action.

    Returns:
        PostAnalytics with the raw metrics, an overall score from 0 to 100 and
        at most four suggestions. An empty post scores zero with no
        suggestions.
    """
    full_text = merged_text(PostDocument(hook=hook, content=content, cta=cta))
    if not full_text.strip():
        return PostAnalytics()

    word_count = len(full_text.split())
    reading_time_sec = math.ceil(word_count / ComposerConstants.WORDS_PER_MINUTE * 60)

    sentences = [s for s in _SENTENCE_END.split(full_text) if s.strip()]
    avg_sentence_length = _round_half_up(word_count / len(sentences)) if sentences else 0

    emoji_count = count_emojis(full_text)

    paragraphs = [p for p in _PARAGRAPH_BREAK.split(full_text) if p.strip()]
    paragraph_count = len(paragraphs)
    total_lines = sum(
        len([line for line in p.split("\n") if line.strip()]) for p in paragraphs
    )
    avg_paragraph_lines = (
        _round_half_up(total_lines / paragraph_count * 10) / 10 if paragraph_count else 0.0
    )

    hook_score = analyze_hook(hook)

    overall = (
        hook_score.score * 0.3
        + _sentence_length_points(avg_sentence_length) * 0.2
        + _paragraph_points(avg_paragraph_lines) * 0.2
        + _word_count_points(word_count) * 0.15
        + _cta_points(cta) * 0.15
    )

    return PostAnalytics(
        word_count=word_count,
        reading_time_sec=reading_time_sec,
        avg_sentence_length=avg_sentence_length,
        emoji_count=emoji_count,
        paragraph_count=paragraph_count,
        avg_paragraph_lines=avg_paragraph_lines,
        hook_score=hook_score,
        overall_score=_round_half_up(overall),
        suggestions=build_suggestions(
            word_count, avg_sentence_length, avg_paragraph_lines,
            emoji_count, hook_score, cta,
        ),
    )
