from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Literal, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field


OPENROUTER_CHAT_URL = "https://openrouter.ai/api/v1/chat/completions"
DEFAULT_CHAT_MODEL = "meta-llama/llama-3-70b-instruct"
DEFAULT_SUMMARIZER_MODEL = "sshleifer/distilbart-cnn-12-6"


class UpstreamSettings(BaseModel):
    api_url: str = OPENROUTER_CHAT_URL
    api_key: str = ""
    model: str = DEFAULT_CHAT_MODEL
    timeout_seconds: float = Field(default=60.0, gt=0.0)


class ServerSettings(BaseModel):
    port: int = Field(default=3001, ge=1, le=65535)
    bind_all: bool = False
    static_dir: Optional[str] = None
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])

    @property
    def host(self) -> str:
        return "0.0.0.0" if self.bind_all else "127.0.0.1"


class SummarizerSettings(BaseModel):
    backend: Literal["local", "remote"] = "local"
    model_name: str = DEFAULT_SUMMARIZER_MODEL
    min_length: int = Field(default=30, ge=0)
    max_length: int = Field(default=100, ge=1)
    format_markdown: bool = True
    warmup: bool = False


class LoggingSettings(BaseModel):
    log_dir: str = "logs"
    level: str = "INFO"


class Settings(BaseModel):
    upstream: UpstreamSettings = Field(default_factory=UpstreamSettings)
    server: ServerSettings = Field(default_factory=ServerSettings)
    summarizer: SummarizerSettings = Field(default_factory=SummarizerSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


# env var -> (section, key)
_ENV_OVERRIDES: dict[str, tuple[str, str]] = {
    "OPENROUTER_API_KEY": ("upstream", "api_key"),
    "OPENROUTER_API_URL": ("upstream", "api_url"),
    "OPENROUTER_MODEL": ("upstream", "model"),
    "PORT": ("server", "port"),
    "BIND_ALL": ("server", "bind_all"),
    "STATIC_DIR": ("server", "static_dir"),
    "CORS_ORIGINS": ("server", "cors_origins"),
    "SUMMARIZER_BACKEND": ("summarizer", "backend"),
    "SUMMARIZER_MODEL": ("summarizer", "model_name"),
    "LOG_DIR": ("logging", "log_dir"),
    "LOG_LEVEL": ("logging", "level"),
}


def _apply_env(raw: dict[str, Any]) -> dict[str, Any]:
    for env_name, (section, key) in _ENV_OVERRIDES.items():
        # Empty strings (e.g. `PORT=` in a compose file) must not clobber defaults.
        value = os.environ.get(env_name)
        if not value:
            continue
        if env_name == "CORS_ORIGINS":
            value = [o.strip() for o in value.split(",") if o.strip()]
        raw.setdefault(section, {})
        raw[section][key] = value
    return raw


def load_settings(config_path: Optional[str | Path] = None, *, env_file: Optional[str | Path] = None) -> Settings:
    """Load settings from YAML (if present), then apply environment overrides."""
    load_dotenv(env_file or Path(__file__).resolve().parents[1] / ".env")

    if config_path is None:
        config_path = os.environ.get("WORKSHOP_GATEWAY_CONFIG")
    path = Path(config_path) if config_path else Path(__file__).resolve().parents[1] / "config.yaml"

    raw: Any = {}
    if path.exists():
        raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    return Settings.model_validate(_apply_env(raw))
