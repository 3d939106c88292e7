"""Application configuration loaded from config.yaml."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

DEFAULT_RELAY_URL = "https://api.allorigins.win/get?url="


@dataclass(frozen=True)
class LLMSettings:
    default_provider: str = "gemini"
    default_model: str = "gemini-2.5-flash"
    temperature: float = 0.2
    timeout: float | None = None  # seconds; None waits indefinitely
    max_retries: int = 1  # total attempts

    def __post_init__(self) -> None:
        if not 0.0 <= self.temperature <= 1.0:
            raise ValueError(f"llm.temperature must be within [0, 1], got {self.temperature}")
        if self.timeout is not None and self.timeout <= 0:
            raise ValueError(f"llm.timeout must be positive, got {self.timeout}")
        if not 1 <= self.max_retries <= 10:
            raise ValueError(f"llm.max_retries must be within [1, 10], got {self.max_retries}")


@dataclass(frozen=True)
class IngestConfig:
    relay_url: str = DEFAULT_RELAY_URL  # empty string fetches pages directly
    fetch_timeout: float = 30.0
    min_line_length: int = 5
    max_upload_mb: int = 10

    def __post_init__(self) -> None:
        if self.fetch_timeout <= 0:
            raise ValueError(f"ingest.fetch_timeout must be positive, got {self.fetch_timeout}")
        if self.min_line_length < 1:
            raise ValueError(f"ingest.min_line_length must be >= 1, got {self.min_line_length}")
        if not 1 <= self.max_upload_mb <= 100:
            raise ValueError(f"ingest.max_upload_mb must be within [1, 100], got {self.max_upload_mb}")

    @property
    def max_upload_bytes(self) -> int:
        return self.max_upload_mb * 1024 * 1024


@dataclass(frozen=True)
class StorageConfig:
    state_path: str = "~/.hiresight/state.db"

    @property
    def resolved_state_path(self) -> Path:
        return Path(self.state_path).expanduser()


@dataclass(frozen=True)
class AppConfig:
    llm: LLMSettings = field(default_factory=LLMSettings)
    ingest: IngestConfig = field(default_factory=IngestConfig)
    storage: StorageConfig = field(default_factory=StorageConfig)


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load config from YAML file, falling back to defaults."""
    if path is None:
        candidates = [
            Path.cwd() / "config.yaml",
            Path(__file__).resolve().parent.parent.parent / "config.yaml",
        ]
        for c in candidates:
            if c.exists():
                path = c
                break

    raw: dict = {}
    if path is not None:
        p = Path(path)
        if p.exists():
            raw = yaml.safe_load(p.read_text(encoding="utf-8")) or {}

    return AppConfig(
        llm=LLMSettings(**raw.get("llm", {})),
        ingest=IngestConfig(**raw.get("ingest", {})),
        storage=StorageConfig(**raw.get("storage", {})),
    )
