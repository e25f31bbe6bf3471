"""Tests for the post document and its character budget."""

import pytest

from poststyle.document import (
    CharacterBudget,
    PostDocument,
    character_budget,
    merged_text,
    preview_text,
)
from poststyle.unicode_style import to_bold


class TestPostDocument:
    def test_defaults_are_empty(self):
        doc = PostDocument()
        assert (doc.hook, doc.content, doc.cta) == ("", "", "")
        assert doc.is_empty

    def test_whitespace_only_is_empty(self):
        assert PostDocument(hook="  ", content="\n\n").is_empty

    def test_replace_field_returns_new_document(self):
        doc = PostDocument(hook="a")
        updated = doc.replace_field("cta", "b")
        assert updated == PostDocument(hook="a", cta="b")
        assert doc.cta == ""

    def test_unknown_field(self):
        with pytest.raises(ValueError):
            PostDocument().get("title")
        with pytest.raises(ValueError):
            PostDocument().replace_field("title", "x")

    def test_dict_round_trip(self):
        doc = PostDocument(hook="H", content="C", cta="A")
        assert doc.to_dict() == {"hook": "H", "content": "C", "cta": "A"}
        assert PostDocument.from_dict(doc.to_dict()) == doc

    def test_from_dict_fills_missing_fields(self):
        assert PostDocument.from_dict({"hook": "H"}) == PostDocument(hook="H")

    def test_from_dict_ignores_extra_keys(self):
        assert PostDocument.from_dict({"cta": "A", "title": "x"}) == PostDocument(cta="A")

    def test_from_dict_rejects_non_strings(self):
        with pytest.raises(ValueError):
            PostDocument.from_dict({"hook": 3})


class TestMergedText:
    def test_joins_fields_with_blank_line(self):
        doc = PostDocument(hook="Hook", content="Body", cta="Go")
        assert merged_text(doc) == "Hook\n\nBody\n\nGo"

    def test_skips_blank_fields(self):
        assert merged_text(PostDocument(hook="Hook", content="   ", cta="Go")) == "Hook\n\nGo"

    def test_empty_document(self):
        assert merged_text(PostDocument()) == ""

    def test_keeps_field_text_verbatim(self):
        assert merged_text(PostDocument(content=" indented\n")) == " indented\n"


class TestCharacterBudget:
    def test_counts_merged_text(self):
        budget = character_budget(PostDocument(hook="ab", cta="cd"), max_chars=10)
        assert budget.count == 6
        assert budget.remaining == 4
        assert not budget.over_limit
        assert budget.percentage == pytest.approx(60.0)

    def test_styled_glyph_counts_once(self):
        assert character_budget(PostDocument(hook=to_bold("abc"))).count == 3

    def test_over_limit(self):
        budget = character_budget(PostDocument(hook="abc"), max_chars=2)
        assert budget.over_limit
        assert budget.remaining == -1
        assert budget.percentage == 100.0

    def test_exactly_at_limit_is_allowed(self):
        assert not character_budget(PostDocument(hook="ab"), max_chars=2).over_limit

    def test_default_limit(self):
        assert character_budget(PostDocument()).limit == 3000

    def test_zero_limit(self):
        assert CharacterBudget(count=0, limit=0).percentage == 100.0


class TestPreviewText:
    def test_exactly_five_lines_is_not_folded(self):
        doc = PostDocument(content="1\n2\n3\n4\n5")
        assert preview_text(doc) == ("1\n2\n3\n4\n5", False)

    def test_sixth_line_is_folded(self):
        doc = PostDocument(content="1\n2\n3\n4\n5\n6")
        assert preview_text(doc) == ("1\n2\n3\n4\n5", True)

    def test_field_separators_count_as_lines(self):
        assert preview_text(PostDocument(hook="a", content="b", cta="c")) == ("a\n\nb\n\nc", False)
        text, truncated = preview_text(PostDocument(hook="a", content="b\nc", cta="d"))
        assert text == "a\n\nb\nc\n"
        assert truncated

    def test_exactly_200_characters_is_not_folded(self):
        doc = PostDocument(hook="x" * 200)
        assert preview_text(doc) == ("x" * 200, False)

    def test_201_characters_are_folded(self):
        doc = PostDocument(hook="x" * 201)
        assert preview_text(doc) == ("x" * 200, True)

    def test_character_limit_applies_within_five_lines(self):
        doc = PostDocument(content="\n".join(["y" * 60] * 6))
        text, truncated = preview_text(doc)
        assert len(text) == 200
        assert truncated

    def test_styled_glyphs_count_once(self):
        doc = PostDocument(hook=to_bold("a" * 200))
        assert preview_text(doc) == (to_bold("a" * 200), False)

    def test_expanded_shows_everything(self):
        doc = PostDocument(hook="x" * 500)
        assert preview_text(doc, expanded=True) == ("x" * 500, False)

    def test_empty_post(self):
        assert preview_text(PostDocument()) == ("", False)
