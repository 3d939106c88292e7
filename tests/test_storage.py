"""Tests for the SQLite settings store."""

from __future__ import annotations

import sqlite3

import pytest

from hiresight.models.settings import LlmConfig, LlmProvider
from hiresight.storage import LLM_CONFIG_KEY, THEME_KEY, SettingsStore


@pytest.fixture
def store(tmp_path) -> SettingsStore:
    return SettingsStore(tmp_path / "nested" / "state.db")


def _write_raw(store: SettingsStore, key: str, value: str) -> None:
    with sqlite3.connect(store.db_path) as conn:
        conn.execute("INSERT OR REPLACE INTO app_state (key, value) VALUES (?, ?)", (key, value))


class TestTheme:
    def test_default_light(self, store):
        assert store.load_theme() == "light"

    def test_round_trip(self, store):
        store.save_theme("dark")
        assert store.load_theme() == "dark"

    def test_invalid_theme_rejected(self, store):
        with pytest.raises(ValueError):
            store.save_theme("neon")

    def test_unknown_stored_value_ignored(self, store):
        _write_raw(store, THEME_KEY, "sepia")
        assert store.load_theme() == "light"


class TestLlmConfig:
    def test_default_when_missing(self, store):
        assert store.load_config() == LlmConfig()

    def test_round_trip_with_keys(self, store):
        config = LlmConfig().with_provider(LlmProvider.OPENAI).with_api_key(LlmProvider.OPENAI, "sk-1")
        store.save_config(config)

        loaded = store.load_config()
        assert loaded == config
        assert loaded.key_for(LlmProvider.OPENAI) == "sk-1"

    def test_stored_as_camel_case_json(self, store):
        store.save_config(LlmConfig())
        with sqlite3.connect(store.db_path) as conn:
            raw = conn.execute("SELECT value FROM app_state WHERE key = ?", (LLM_CONFIG_KEY,)).fetchone()[0]
        assert '"apiKeys"' in raw

    def test_malformed_json_falls_back(self, store):
        _write_raw(store, LLM_CONFIG_KEY, "{not json")
        assert store.load_config() == LlmConfig()

    def test_invalid_shape_falls_back(self, store):
        _write_raw(store, LLM_CONFIG_KEY, '{"apiKeys": "oops"}')
        assert store.load_config() == LlmConfig()

    def test_unknown_provider_kept_as_default(self, store):
        _write_raw(store, LLM_CONFIG_KEY, '{"provider": "cohere", "model": "command"}')
        config = store.load_config()
        assert config.provider is LlmProvider.GEMINI
        assert config.model == "command"


class TestPersistence:
    def test_survives_reopen(self, tmp_path):
        path = tmp_path / "state.db"
        SettingsStore(path).save_theme("dark")
        assert SettingsStore(path).load_theme() == "dark"

    def test_clear(self, store):
        store.save_theme("dark")
        store.save_config(LlmConfig())
        assert store.clear() == 2
        assert store.load_theme() == "light"
