"""
Unit tests for remembered provider preferences.
"""
import pytest

from ai_providers.base import AIProviderType
from ai_providers.preferences import JsonFileStore, MemoryStore, ProviderPreferences


class TestProviderPreferences:

    def test_save_and_load(self):
        prefs = ProviderPreferences(MemoryStore())
        prefs.save("gpt", "sk-test")
        assert prefs.load() == (AIProviderType.OPENAI, "sk-test")

    def test_nothing_saved(self):
        assert ProviderPreferences(MemoryStore()).load() is None

    def test_provider_defaults_to_gemini(self):
        prefs = ProviderPreferences(MemoryStore({"ai_api_key": "k"}))
        assert prefs.load() == (AIProviderType.GEMINI, "k")

    def test_unknown_saved_provider_defaults_to_gemini(self):
        prefs = ProviderPreferences(MemoryStore({"ai_api_key": "k", "ai_provider": "claude"}))
        assert prefs.load() == (AIProviderType.GEMINI, "k")

    def test_clear(self):
        prefs = ProviderPreferences(MemoryStore())
        prefs.save("gemini", "k")
        prefs.clear()
        assert prefs.load() is None

    def test_save_unknown_provider(self):
        with pytest.raises(ValueError):
            ProviderPreferences(MemoryStore()).save("claude", "k")


class TestJsonFileStore:

    def test_persists_across_instances(self, tmp_path):
        path = tmp_path / "nested" / "prefs.json"
        ProviderPreferences(JsonFileStore(path)).save("openai", "sk-1")
        assert ProviderPreferences(JsonFileStore(path)).load() == (AIProviderType.OPENAI, "sk-1")

    def test_invalid_json_ignored(self, tmp_path):
        path = tmp_path / "prefs.json"
        path.write_text("{not json", encoding="utf-8")
        store = JsonFileStore(path)
        assert store.get("ai_api_key") is None
        store.set("ai_api_key", "k")
        assert store.get("ai_api_key") == "k"

    def test_undecodable_file_ignored(self, tmp_path):
        path = tmp_path / "prefs.json"
        path.write_bytes(b'{"ai_api_key": "\xff\xfe"}')
        assert ProviderPreferences(JsonFileStore(path)).load() is None

    def test_unreadable_path_ignored(self, tmp_path):
        # A directory in place of the file raises OSError on read
        path = tmp_path / "prefs.json"
        path.mkdir()
        assert ProviderPreferences(JsonFileStore(path)).load() is None

    def test_remove_missing_key(self, tmp_path):
        store = JsonFileStore(tmp_path / "prefs.json")
        store.remove("ai_api_key")
        assert not (tmp_path / "prefs.json").exists()
