"""Tests for Unicode lookalike styling."""

import string

import pytest

from poststyle.unicode_style import (
    Style,
    is_emoji,
    is_selection_bold,
    is_selection_italic,
    remove_bold,
    remove_italic,
    strip_formatting,
    style_of,
    to_bold,
    to_italic,
    to_plain,
    toggle_bold,
    toggle_italic,
)

ALNUM = string.ascii_letters + string.digits

BOLD_A = chr(0x1D5D4)
BOLD_SMALL_A = chr(0x1D5EE)
BOLD_ZERO = chr(0x1D7EC)
ITALIC_A = chr(0x1D608)
ITALIC_SMALL_A = chr(0x1D622)
BOLD_ITALIC_A = chr(0x1D63C)
BOLD_ITALIC_SMALL_A = chr(0x1D656)

GRINNING = "\U0001F600"
THUMBS_UP = "\U0001F44D"


class TestGlyphTables:
    """The four variants line up by ordinal position."""

    def test_first_glyphs(self):
        assert to_bold("Aa0") == BOLD_A + BOLD_SMALL_A + BOLD_ZERO
        assert to_italic("Aa") == ITALIC_A + ITALIC_SMALL_A
        assert to_italic(to_bold("Aa")) == BOLD_ITALIC_A + BOLD_ITALIC_SMALL_A

    def test_last_glyphs(self):
        assert to_bold("Zz9") == chr(0x1D5D4 + 25) + chr(0x1D5EE + 25) + chr(0x1D7EC + 9)
        assert to_italic("Zz") == chr(0x1D608 + 25) + chr(0x1D622 + 25)

    def test_styled_glyphs_are_single_code_points(self):
        assert len(to_bold(ALNUM)) == len(ALNUM)
        assert len(to_italic(string.ascii_letters)) == 52

    def test_variants_are_disjoint(self):
        normal = set(ALNUM)
        bold = set(to_bold(ALNUM))
        italic = set(to_italic(string.ascii_letters))
        bold_italic = set(to_italic(to_bold(string.ascii_letters)))
        groups = [normal, bold, italic, bold_italic]
        for i, a in enumerate(groups):
            for b in groups[i + 1:]:
                assert not a & b

    def test_style_of(self):
        assert style_of("a") is Style.NORMAL
        assert style_of("7") is Style.NORMAL
        assert style_of(BOLD_A) is Style.BOLD
        assert style_of(ITALIC_A) is Style.ITALIC
        assert style_of(BOLD_ITALIC_A) is Style.BOLD_ITALIC
        assert style_of("!") is None
        assert style_of("é") is None


class TestToBold:
    def test_plain_letters_and_digits(self):
        assert all(style_of(c) is Style.BOLD for c in to_bold(ALNUM))

    def test_italic_becomes_bold_italic(self):
        assert to_bold(ITALIC_A) == BOLD_ITALIC_A

    def test_already_bold_unchanged(self):
        assert to_bold(BOLD_A) == BOLD_A
        assert to_bold(BOLD_ITALIC_A) == BOLD_ITALIC_A

    def test_pass_through(self):
        result = to_bold(f"Hello, {GRINNING}!")
        assert result[5:] == f", {GRINNING}!"
        assert result[:5] == to_bold("Hello")
        assert all(style_of(c) is Style.BOLD for c in result[:5])

    def test_line_breaks_and_accents_pass_through(self):
        assert to_bold("a\nb") == to_bold("a") + "\n" + to_bold("b")
        assert to_bold("é") == "é"

    def test_idempotent(self):
        text = f"Mixed {to_italic('text')} 123 {THUMBS_UP}"
        assert to_bold(to_bold(text)) == to_bold(text)

    def test_empty(self):
        assert to_bold("") == ""


class TestToItalic:
    def test_plain_letters(self):
        assert all(style_of(c) is Style.ITALIC for c in to_italic(string.ascii_letters))

    def test_bold_becomes_bold_italic(self):
        assert to_italic(BOLD_SMALL_A) == BOLD_ITALIC_SMALL_A

    def test_digit_has_no_italic_form(self):
        assert to_italic("5") == "5"

    def test_bold_digit_stays_bold(self):
        assert to_italic(to_bold("5")) == to_bold("5")

    def test_already_italic_unchanged(self):
        assert to_italic(ITALIC_A) == ITALIC_A
        assert to_italic(BOLD_ITALIC_A) == BOLD_ITALIC_A


class TestRemove:
    @pytest.mark.parametrize("text", ["", "abc", "Hello World 2024", ALNUM])
    def test_bold_round_trip(self, text):
        assert remove_bold(to_bold(text)) == text

    @pytest.mark.parametrize("text", ["", "abc", "Hello World 2024", ALNUM])
    def test_italic_round_trip(self, text):
        assert remove_italic(to_italic(text)) == text

    def test_remove_bold_demotes_bold_italic_to_italic(self):
        assert remove_bold(BOLD_ITALIC_A) == ITALIC_A

    def test_remove_italic_demotes_bold_italic_to_bold(self):
        assert remove_italic(BOLD_ITALIC_A) == BOLD_A

    def test_remove_bold_leaves_italic(self):
        assert remove_bold(ITALIC_A) == ITALIC_A

    def test_remove_italic_leaves_bold_digits(self):
        assert remove_italic(BOLD_ZERO) == BOLD_ZERO

    def test_remove_keeps_emoji(self):
        assert remove_bold(to_bold("Hi") + GRINNING) == "Hi" + GRINNING
        assert remove_italic(to_italic("Hi") + GRINNING) == "Hi" + GRINNING


class TestStripFormatting:
    def test_removes_emoji(self):
        assert strip_formatting(f"Hi {GRINNING}") == "Hi "

    def test_demotes_every_style(self):
        text = to_bold("Bold") + " " + to_italic("it") + " " + to_italic(to_bold("both")) + to_bold("42")
        assert strip_formatting(text) == "Bold it both42"

    def test_idempotent(self):
        text = f"{to_bold('Big')} news {GRINNING}\U0001F1E9\U0001F1EA!"
        once = strip_formatting(text)
        assert strip_formatting(once) == once

    def test_removes_flags_and_dingbats(self):
        assert strip_formatting("\U0001F1E9\U0001F1EA go ✔") == " go "

    def test_removes_variation_selector_of_emoji(self):
        assert strip_formatting("\u267b\ufe0f Repost") == " Repost"

    def test_removes_zwj_sequence(self):
        family = "\U0001F468\u200d\U0001F469\u200d\U0001F467"
        assert strip_formatting(f"a{family}b") == "ab"

    def test_removes_skin_tone_modifier(self):
        assert strip_formatting(f"{THUMBS_UP}\U0001F3FD ok") == " ok"

    def test_keeps_arrows_bullets_and_other_scripts(self):
        text = "→ • Grüße Привет 日本"
        assert strip_formatting(text) == text

    def test_keeps_lone_zwj_and_selectors(self):
        assert strip_formatting("a\u200db") == "a\u200db"

    def test_stronger_than_remove_both(self):
        text = to_italic(to_bold("ok")) + GRINNING
        assert remove_italic(remove_bold(text)) == "ok" + GRINNING
        assert strip_formatting(text) == "ok"

    def test_to_plain_keeps_emoji(self):
        assert to_plain(to_bold("Hi") + GRINNING) == "Hi" + GRINNING

    @pytest.mark.parametrize("char", [
        "⌚", "⏰", "⏳", "⬅", "⬆", "⬇",
        "⤴", "⤵", "‼", "⁉", "〰", "㊗",
    ])
    def test_removes_symbol_emoji_outside_emoji_blocks(self, char):
        assert is_emoji(char)
        assert strip_formatting(f"a{char}\ufe0fb") == "ab"

    def test_removes_keycap_sequences(self):
        assert strip_formatting("1\ufe0f\u20e3 go") == " go"
        assert strip_formatting("#\u20e3*\ufe0f\u20e3") == ""

    def test_keeps_digits_and_hash_without_keycap(self):
        assert strip_formatting("#1 tip, 2\ufe0f") == "#1 tip, 2\ufe0f"


class TestIsEmoji:
    @pytest.mark.parametrize("char", [GRINNING, THUMBS_UP, "☀", "✅", "\U0001F680", "\U0001FA77", "⭐"])
    def test_emoji(self, char):
        assert is_emoji(char)

    @pytest.mark.parametrize("char", ["a", "→", "•", "€", BOLD_A, "", "ab"])
    def test_not_emoji(self, char):
        assert not is_emoji(char)


class TestSelectionDetection:
    def test_bold_selection(self):
        assert is_selection_bold(to_bold("abc")) is True

    def test_bold_italic_counts_as_bold(self):
        assert is_selection_bold(to_italic(to_bold("abc"))) is True

    def test_bold_italic_counts_as_italic(self):
        assert is_selection_italic(to_italic(to_bold("abc"))) is True

    def test_mixed_selection_not_bold(self):
        assert is_selection_bold(to_bold("ab") + "c") is False

    def test_punctuation_ignored(self):
        assert is_selection_bold(to_bold("Hi") + ", " + GRINNING + "!") is True

    def test_empty_and_non_stylable(self):
        assert is_selection_bold("") is False
        assert is_selection_italic("") is False
        assert is_selection_bold(f" ,.{GRINNING}") is False
        assert is_selection_italic(f" ,.{GRINNING}") is False

    def test_digits_count_for_bold(self):
        assert is_selection_bold(to_bold("A") + "5") is False
        assert is_selection_bold(to_bold("A5")) is True

    def test_digits_ignored_for_italic(self):
        assert is_selection_italic("5" + ITALIC_A) is True
        assert is_selection_italic(BOLD_ZERO + ITALIC_A) is True

    def test_digits_only_are_not_italic(self):
        assert is_selection_italic("123") is False

    def test_plain_not_italic(self):
        assert is_selection_italic("abc") is False


class TestToggle:
    def test_toggle_bold_on_and_off(self):
        assert toggle_bold("abc") == to_bold("abc")
        assert toggle_bold(to_bold("abc")) == "abc"

    def test_toggle_bold_on_mixed_bolds_everything(self):
        mixed = to_bold("ab") + "c"
        assert toggle_bold(mixed) == to_bold("abc")

    def test_toggle_italic_keeps_bold(self):
        bold = to_bold("abc")
        both = toggle_italic(bold)
        assert both == to_italic(bold)
        assert toggle_italic(both) == bold
