"""Application configuration loaded from rezzy.yaml and the environment."""

from __future__ import annotations

import logging
import os
import tempfile
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from rezzy.exceptions import ConfigError

logger = logging.getLogger(__name__)

PROVIDERS = ("openai", "ollama", "anthropic")

KNOWN_OPENAI_MODELS = (
    "gpt-3.5-turbo",
    "gpt-4",
    "gpt-4-turbo",
    "gpt-4o",
    "gpt-4o-mini",
    "gpt-4.1",
    "gpt-4.1-mini",
    "gpt-4.1-nano",
)

# env var -> (section, key)
ENV_OVERRIDES: dict[str, tuple[str, str]] = {
    "LLM_PROVIDER": ("llm", "provider"),
    "OPENAI_API_KEY": ("openai", "api_key"),
    "OPENAI_API_BASE_URL": ("openai", "base_url"),
    "OPENAI_MODEL": ("openai", "model"),
    "OLLAMA_API_BASE_URL": ("ollama", "base_url"),
    "OLLAMA_MODEL": ("ollama", "model"),
    "ANTHROPIC_API_KEY": ("anthropic", "api_key"),
    "ANTHROPIC_MODEL": ("anthropic", "model"),
    "REZZY_LOG_DIR": ("output", "log_dir"),
}


@dataclass(frozen=True)
class OpenAIConfig:
    api_key: str = ""
    base_url: str | None = None
    model: str = "gpt-4o"


@dataclass(frozen=True)
class OllamaConfig:
    base_url: str = ""
    model: str = "llama3.1"


@dataclass(frozen=True)
class AnthropicConfig:
    api_key: str = ""
    model: str = "claude-sonnet-4-5-20250929"
    max_tokens: int = 8192


@dataclass(frozen=True)
class LLMConfig:
    provider: str = "openai"
    timeout: int = 120
    max_retries: int = 3
    openai: OpenAIConfig = field(default_factory=OpenAIConfig)
    ollama: OllamaConfig = field(default_factory=OllamaConfig)
    anthropic: AnthropicConfig = field(default_factory=AnthropicConfig)

    def __post_init__(self) -> None:
        if self.provider not in PROVIDERS:
            raise ValueError(f"provider must be one of {PROVIDERS}, got {self.provider!r}")
        if self.timeout < 1:
            raise ValueError(f"timeout must be >= 1, got {self.timeout}")
        if not 1 <= self.max_retries <= 10:
            raise ValueError(f"max_retries must be between 1 and 10, got {self.max_retries}")


@dataclass(frozen=True)
class OutputConfig:
    log_dir: str = ""
    write_run_log: bool = True

    @property
    def resolved_log_dir(self) -> Path:
        if not self.log_dir:
            return Path(tempfile.gettempdir())
        return Path(self.log_dir).expanduser()


@dataclass(frozen=True)
class AppConfig:
    llm: LLMConfig = field(default_factory=LLMConfig)
    output: OutputConfig = field(default_factory=OutputConfig)


def load_config(
    path: str | Path | None = None,
    env: Mapping[str, str] | None = None,
) -> AppConfig:
    """Load config from YAML, then apply environment overrides.

    ``env`` defaults to ``os.environ``; pass a dict to keep tests hermetic.
    """
    if path is None:
        candidate = Path.cwd() / "rezzy.yaml"
        if candidate.exists():
            path = candidate

    raw: dict = {}
    if path is not None:
        p = Path(path)
        if p.exists():
            raw = yaml.safe_load(p.read_text(encoding="utf-8")) or {}

    llm_raw = dict(raw.get("llm", {}))
    sections = {
        "llm": llm_raw,
        "openai": dict(llm_raw.pop("openai", {}) or {}),
        "ollama": dict(llm_raw.pop("ollama", {}) or {}),
        "anthropic": dict(llm_raw.pop("anthropic", {}) or {}),
        "output": dict(raw.get("output", {})),
    }

    environ = os.environ if env is None else env
    for var, (section, key) in ENV_OVERRIDES.items():
        value = environ.get(var)
        if value:
            sections[section][key] = value

    return AppConfig(
        llm=LLMConfig(
            **sections["llm"],
            openai=OpenAIConfig(**sections["openai"]),
            ollama=OllamaConfig(**sections["ollama"]),
            anthropic=AnthropicConfig(**sections["anthropic"]),
        ),
        output=OutputConfig(**sections["output"]),
    )


def validate_provider_config(llm: LLMConfig) -> None:
    """Raise ConfigError when the selected provider lacks what it needs."""
    if llm.provider == "openai":
        if not llm.openai.api_key:
            raise ConfigError(
                "OPENAI_API_KEY is not set. Set it to your OpenAI API key."
            )
        if llm.openai.model not in KNOWN_OPENAI_MODELS:
            logger.warning(
                "OpenAI model %r is not in the known model list; continuing anyway",
                llm.openai.model,
            )
    elif llm.provider == "ollama":
        if not llm.ollama.base_url:
            raise ConfigError(
                "OLLAMA_API_BASE_URL is not set. Point it at your Ollama server."
            )
    elif llm.provider == "anthropic":
        if not llm.anthropic.api_key:
            raise ConfigError(
                "ANTHROPIC_API_KEY is not set. Set it to your Anthropic API key."
            )
