from rezzy.config import LLMConfig, validate_provider_config
from rezzy.providers.anthropic_provider import AnthropicProvider
from rezzy.providers.base import LLMProvider, parse_cover_letter, parse_resume
from rezzy.providers.ollama_provider import OllamaProvider
from rezzy.providers.openai_provider import OpenAIProvider


def create_provider(llm: LLMConfig) -> LLMProvider:
    """Build the provider named by ``llm.provider`` after checking its settings."""
    validate_provider_config(llm)
    if llm.provider == "openai":
        return OpenAIProvider(llm.openai, timeout=llm.timeout, max_retries=llm.max_retries)
    if llm.provider == "ollama":
        return OllamaProvider(llm.ollama, timeout=llm.timeout, max_retries=llm.max_retries)
    return AnthropicProvider(llm.anthropic, timeout=llm.timeout, max_retries=llm.max_retries)


__all__ = [
    "AnthropicProvider",
    "LLMProvider",
    "OllamaProvider",
    "OpenAIProvider",
    "create_provider",
    "parse_cover_letter",
    "parse_resume",
]
