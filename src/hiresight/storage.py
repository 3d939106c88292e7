"""SQLite-backed local state: theme preference and the serialized LlmConfig."""

from __future__ import annotations

import json
import logging
import sqlite3
from pathlib import Path

from pydantic import ValidationError

from hiresight.models.settings import LlmConfig, Theme

logger = logging.getLogger(__name__)

DEFAULT_DB_PATH = Path.home() / ".hiresight" / "state.db"
DEFAULT_THEME: Theme = "light"

THEME_KEY = "theme"
LLM_CONFIG_KEY = "llmConfig"


class SettingsStore:
    """Two-key store read at startup and written on every settings change.

    Unreadable or malformed values fall back to defaults.
    """

    def __init__(self, db_path: str | Path = DEFAULT_DB_PATH):
        self.db_path = Path(db_path).expanduser()
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._init_db()

    def _connect(self) -> sqlite3.Connection:
        return sqlite3.connect(str(self.db_path))

    def _init_db(self) -> None:
        with self._connect() as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS app_state (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL
                )
            """)

    def _get(self, key: str) -> str | None:
        with self._connect() as conn:
            row = conn.execute("SELECT value FROM app_state WHERE key = ?", (key,)).fetchone()
        return row[0] if row else None

    def _put(self, key: str, value: str) -> None:
        with self._connect() as conn:
            conn.execute(
                "INSERT OR REPLACE INTO app_state (key, value) VALUES (?, ?)",
                (key, value),
            )

    def load_theme(self) -> Theme:
        value = self._get(THEME_KEY)
        if value in ("light", "dark"):
            return value
        if value is not None:
            logger.warning("Ignoring unknown theme %r in %s", value, self.db_path)
        return DEFAULT_THEME

    def save_theme(self, theme: Theme) -> None:
        if theme not in ("light", "dark"):
            raise ValueError(f"theme must be 'light' or 'dark', got {theme!r}")
        self._put(THEME_KEY, theme)

    def load_config(self) -> LlmConfig:
        raw = self._get(LLM_CONFIG_KEY)
        if raw is None:
            return LlmConfig()
        try:
            return LlmConfig.model_validate(json.loads(raw))
        except (json.JSONDecodeError, ValidationError) as exc:
            logger.warning("Malformed saved LLM config, using defaults: %s", exc.__class__.__name__)
            return LlmConfig()

    def save_config(self, config: LlmConfig) -> None:
        self._put(LLM_CONFIG_KEY, config.model_dump_json(by_alias=True))

    def clear(self) -> int:
        """Forget all saved state. Returns count of deleted rows."""
        with self._connect() as conn:
            cursor = conn.execute("DELETE FROM app_state")
            return cursor.rowcount
