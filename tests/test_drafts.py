"""Unit tests for draft storage."""

import json
import os
from unittest.mock import patch

import pytest

from poststyle.document import PostDocument
from poststyle.drafts import DraftStore, default_draft_dir
from poststyle.unicode_style import to_bold


@pytest.fixture
def store(tmp_path):
    return DraftStore(tmp_path / "drafts")


class TestSave:
    def test_save_creates_directory_and_file(self, store):
        assert store.save(PostDocument(hook="Hi"))
        assert store.exists()

    def test_file_is_readable_json(self, store):
        store.save(PostDocument(hook=to_bold("Hi"), cta="Go"))
        with open(store.path, encoding="utf-8") as f:
            data = json.load(f)
        assert data == {"hook": to_bold("Hi"), "content": "", "cta": "Go"}

    def test_styled_text_stored_unescaped(self, store):
        store.save(PostDocument(hook=to_bold("Hi")))
        assert to_bold("Hi") in store.path.read_text(encoding="utf-8")

    def test_overwrites_previous_draft(self, store):
        store.save(PostDocument(hook="old"))
        store.save(PostDocument(hook="new"))
        assert store.load() == PostDocument(hook="new")

    def test_no_temp_files_left_behind(self, store):
        store.save(PostDocument(hook="Hi"))
        assert os.listdir(store.path.parent) == [store.path.name]

    def test_failed_rename_keeps_old_draft(self, store):
        store.save(PostDocument(hook="old"))
        with patch("poststyle.drafts.os.replace", side_effect=OSError("disk full")):
            assert not store.save(PostDocument(hook="new"))
        assert store.load() == PostDocument(hook="old")
        assert os.listdir(store.path.parent) == [store.path.name]


class TestLoad:
    def test_missing_draft(self, store):
        assert store.load() is None

    def test_round_trip(self, store):
        doc = PostDocument(hook="H", content="Line 1\nLine 2", cta="→ A")
        store.save(doc)
        assert store.load() == doc

    def test_corrupt_json(self, store):
        store.path.parent.mkdir(parents=True)
        store.path.write_text("{not json", encoding="utf-8")
        assert store.load() is None

    def test_not_a_dict(self, store):
        store.path.parent.mkdir(parents=True)
        store.path.write_text("[1, 2]", encoding="utf-8")
        assert store.load() is None

    def test_wrong_field_type(self, store):
        store.path.parent.mkdir(parents=True)
        store.path.write_text('{"hook": 5}', encoding="utf-8")
        assert store.load() is None


class TestDelete:
    def test_delete(self, store):
        store.save(PostDocument(hook="Hi"))
        store.delete()
        assert not store.exists()

    def test_delete_missing_is_ok(self, store):
        store.delete()
        assert not store.exists()


def test_default_directory_uses_platformdirs(tmp_path):
    with patch("poststyle.drafts.platformdirs.user_data_dir", return_value=str(tmp_path)) as user_data_dir:
        assert default_draft_dir() == tmp_path
        assert DraftStore().path == tmp_path / "draft.json"
    user_data_dir.assert_called_with("poststyle", "poststyle")
