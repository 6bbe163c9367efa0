"""
AI Providers Package
Alternate text source for Minutes of Meeting

Supports:
- Google Gemini
- OpenAI GPT

Usage:
    from ai_providers import MinutesTextSource, MinutesRequest
    from config.settings import settings

    source = MinutesTextSource(settings.get_ai_config("gemini"))
    text = await source.generate_minutes(MinutesRequest.from_record(record))
"""

from .base import (
    BaseAIProvider,
    AIProviderType,
    AIMessage,
    AIResponse,
    AIConfig,
    AIConfigurationError,
    ExternalGenerationError,
)

from .openai_provider import OpenAIProvider
from .gemini_provider import GeminiProvider

from .manager import (
    ProviderInfo,
    PROVIDER_REGISTRY,
    PROVIDER_INFO,
    create_provider,
    list_providers,
    resolve_provider_type,
)

from .minutes_source import MinutesRequest, MinutesTextSource
from .preferences import (
    KeyValueStore,
    MemoryStore,
    JsonFileStore,
    ProviderPreferences,
)

__all__ = [
    # Base classes
    "BaseAIProvider",
    "AIProviderType",
    "AIMessage",
    "AIResponse",
    "AIConfig",
    "AIConfigurationError",
    "ExternalGenerationError",

    # Providers
    "OpenAIProvider",
    "GeminiProvider",

    # Registry
    "ProviderInfo",
    "PROVIDER_REGISTRY",
    "PROVIDER_INFO",
    "create_provider",
    "list_providers",
    "resolve_provider_type",

    # Minutes generation
    "MinutesRequest",
    "MinutesTextSource",

    # Preferences
    "KeyValueStore",
    "MemoryStore",
    "JsonFileStore",
    "ProviderPreferences",
]

__version__ = "1.0.0"
