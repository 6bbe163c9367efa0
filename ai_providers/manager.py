"""
AI Provider Registry

Maps provider names to provider classes and builds configured instances.
"""

from typing import Dict, List, Type
from dataclasses import dataclass

from .base import BaseAIProvider, AIProviderType, AIConfig
from .openai_provider import OpenAIProvider
from .gemini_provider import GeminiProvider


@dataclass
class ProviderInfo:
    """Information about an AI provider"""
    type: AIProviderType
    name: str
    description: str
    models: Dict[str, str]
    default_model: str
    env_key: str  # Environment variable name for API key


# Registry of all available providers
PROVIDER_REGISTRY: Dict[AIProviderType, Type[BaseAIProvider]] = {
    AIProviderType.GEMINI: GeminiProvider,
    AIProviderType.OPENAI: OpenAIProvider,
}

PROVIDER_INFO: Dict[AIProviderType, ProviderInfo] = {
    AIProviderType.GEMINI: ProviderInfo(
        type=AIProviderType.GEMINI,
        name="Google Gemini",
        description="Gemini - free tier available",
        models=GeminiProvider.MODELS,
        default_model=GeminiProvider.DEFAULT_MODEL,
        env_key="GOOGLE_API_KEY"
    ),
    AIProviderType.OPENAI: ProviderInfo(
        type=AIProviderType.OPENAI,
        name="OpenAI GPT",
        description="GPT chat models - paid per token",
        models=OpenAIProvider.MODELS,
        default_model=OpenAIProvider.DEFAULT_MODEL,
        env_key="OPENAI_API_KEY"
    ),
}

_PROVIDER_ALIASES = {
    "gemini": AIProviderType.GEMINI,
    "google": AIProviderType.GEMINI,
    "openai": AIProviderType.OPENAI,
    "gpt": AIProviderType.OPENAI,
    "chatgpt": AIProviderType.OPENAI,
}


def resolve_provider_type(name) -> AIProviderType:
    """Convert a provider name ("gemini", "gpt", ...) to AIProviderType."""
    if isinstance(name, AIProviderType):
        return name
    ptype = _PROVIDER_ALIASES.get(str(name or "").strip().lower())
    if not ptype:
        raise ValueError(f"Unknown provider: {name}")
    return ptype


def create_provider(config: AIConfig) -> BaseAIProvider:
    """Instantiate the provider class registered for ``config.provider``."""
    provider_class = PROVIDER_REGISTRY[config.provider]
    return provider_class(config)


def list_providers() -> List[ProviderInfo]:
    return list(PROVIDER_INFO.values())
