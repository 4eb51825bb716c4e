"""Tests for scene and character storage backends."""

import json

import pytest

from scriptlens import analyze_screenplay
from scriptlens.exceptions import StorageError
from scriptlens.storage import (
    STORAGE_VERSION,
    CharacterStore,
    InMemoryCharacterStore,
    InMemorySceneStore,
    JsonCharacterStore,
    JsonSceneStore,
    SceneStore,
    json_stores,
)


@pytest.fixture
def analysis(sample_screenplay):
    return analyze_screenplay(sample_screenplay)


class TestInMemoryStores:
    """Test the in-memory backends."""

    def test_scene_store(self, analysis):
        """Test scenes come back as saved."""
        store = InMemorySceneStore()
        assert store.load() == []
        result = store.save(analysis.scenes)
        assert result.count == 2
        assert result.location == ":memory:"
        assert store.load() == list(analysis.scenes)

    def test_scene_store_copies(self, analysis):
        """Test saved scenes are isolated from caller mutation."""
        store = InMemorySceneStore()
        scenes = list(analysis.scenes)
        store.save(scenes)
        expected = scenes[0].word_count

        store.load()[0].word_count = 999
        scenes[0].word_count = 998

        assert store.load()[0].word_count == expected

    def test_character_store_copies(self, analysis):
        """Test saved records are isolated from later mutation."""
        store = InMemoryCharacterStore()
        store.save(analysis.characters)
        loaded = store.load()
        loaded["JOHN"].dialogue_count = 99
        assert store.load()["JOHN"].dialogue_count == 2

    def test_protocols(self):
        """Test backends satisfy the storage protocols."""
        assert isinstance(InMemorySceneStore(), SceneStore)
        assert isinstance(InMemoryCharacterStore(), CharacterStore)
        assert isinstance(JsonSceneStore("scenes.json"), SceneStore)
        assert isinstance(JsonCharacterStore("characters.json"), CharacterStore)


class TestJsonSceneStore:
    """Test the JSON scene backend."""

    def test_save_and_load(self, tmp_path, analysis):
        """Test scenes survive a save and load."""
        store = JsonSceneStore(tmp_path / "nested" / "scenes.json")
        result = store.save(analysis.scenes)

        assert result.count == 2
        assert result.location == str(tmp_path / "nested" / "scenes.json")
        assert store.load() == list(analysis.scenes)

    def test_document_layout(self, tmp_path, analysis):
        """Test the versioned document shape."""
        path = tmp_path / "scenes.json"
        JsonSceneStore(path).save(analysis.scenes)

        document = json.loads(path.read_text(encoding="utf-8"))
        assert document["version"] == STORAGE_VERSION
        assert document["scenes"][0]["heading"] == "INT. COFFEE SHOP - MORNING"
        assert document["scenes"][0]["characters"] == ["JOHN", "SARAH"]

    def test_save_replaces_previous(self, tmp_path, analysis):
        """Test a save overwrites the whole document."""
        store = JsonSceneStore(tmp_path / "scenes.json")
        store.save(analysis.scenes)
        store.save(analysis.scenes[:1])
        assert len(store.load()) == 1

    def test_no_temporary_files_left(self, tmp_path, analysis):
        """Test the atomic write cleans up after itself."""
        JsonSceneStore(tmp_path / "scenes.json").save(analysis.scenes)
        assert [p.name for p in tmp_path.iterdir()] == ["scenes.json"]

    def test_missing_file_loads_empty(self, tmp_path):
        """Test an unsaved store is empty."""
        assert JsonSceneStore(tmp_path / "absent.json").load() == []

    @pytest.mark.parametrize(
        "content",
        [
            "{not json",
            "[]",
            '{"version": 99, "scenes": []}',
            '{"version": 1}',
            '{"version": 1, "scenes": [{"heading": "INT. X"}]}',
            '{"version": 1, "scenes": ["oops"]}',
        ],
    )
    def test_invalid_content(self, tmp_path, content):
        """Test unreadable documents raise StorageError."""
        path = tmp_path / "scenes.json"
        path.write_text(content, encoding="utf-8")
        with pytest.raises(StorageError) as exc_info:
            JsonSceneStore(path).load()
        assert exc_info.value.details["path"] == str(path)

    def test_unwritable_location(self, tmp_path, analysis):
        """Test write failures raise StorageError."""
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")
        with pytest.raises(StorageError):
            JsonSceneStore(blocker / "scenes.json").save(analysis.scenes)


class TestJsonCharacterStore:
    """Test the JSON character backend."""

    def test_save_and_load(self, tmp_path, analysis):
        """Test records and their order survive a save and load."""
        store = JsonCharacterStore(tmp_path / "characters.json")
        result = store.save(analysis.characters)

        loaded = store.load()
        assert result.count == 2
        assert list(loaded) == ["JOHN", "SARAH"]
        assert loaded == analysis.characters

    def test_invalid_record(self, tmp_path):
        """Test a record missing required fields raises StorageError."""
        path = tmp_path / "characters.json"
        path.write_text('{"version": 1, "characters": [{}]}', encoding="utf-8")
        with pytest.raises(StorageError):
            JsonCharacterStore(path).load()


def test_json_stores_share_directory(tmp_path):
    """Test both stores live side by side."""
    scene_store, character_store = json_stores(tmp_path)
    assert scene_store.path == tmp_path / "scenes.json"
    assert character_store.path == tmp_path / "characters.json"
