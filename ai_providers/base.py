"""
Base AI Provider - Abstract Interface
Alternate text source for Minutes of Meeting
"""

from abc import ABC, abstractmethod
from typing import Optional, List, Dict
from dataclasses import dataclass
from enum import Enum


# OpenAI reports "length", Gemini "MAX_TOKENS"
TRUNCATED_FINISH_REASONS = ("length", "MAX_TOKENS")


class AIProviderType(Enum):
    """Supported AI Providers"""
    GEMINI = "gemini"
    OPENAI = "openai"


class AIConfigurationError(Exception):
    """No credential configured for the selected provider."""


class ExternalGenerationError(Exception):
    """The provider call failed or returned no usable text."""

    def __init__(self, message: str, provider: Optional[AIProviderType] = None):
        self.provider = provider
        super().__init__(message)


@dataclass
class AIMessage:
    """Unified message format across providers"""
    role: str  # "user", "assistant", "system"
    content: str


@dataclass
class AIResponse:
    """Unified response format"""
    content: str
    model: str
    provider: AIProviderType
    usage: Optional[Dict[str, int]] = None  # tokens used
    finish_reason: Optional[str] = None

    @property
    def truncated(self) -> bool:
        """Reply was cut off at the token limit"""
        return self.finish_reason in TRUNCATED_FINISH_REASONS


@dataclass(frozen=True)
class AIConfig:
    """
    Provider configuration.

    Passed explicitly to every provider call; remembering the user's last
    choice is the caller's job (see ProviderPreferences).
    """
    provider: AIProviderType
    api_key: str
    model: str
    max_tokens: int = 500
    temperature: float = 0.7
    base_url: Optional[str] = None  # For custom endpoints


class BaseAIProvider(ABC):
    """
    Abstract base class for AI providers.
    All providers must implement these methods.
    """

    def __init__(self, config: AIConfig):
        self.config = config
        self._client = None

    @property
    @abstractmethod
    def provider_type(self) -> AIProviderType:
        """Return the provider type"""
        pass

    @property
    @abstractmethod
    def supported_models(self) -> List[str]:
        """Return list of supported models"""
        pass

    @abstractmethod
    async def initialize(self) -> None:
        """Initialize the client connection"""
        pass

    @abstractmethod
    async def complete(
        self,
        messages: List[AIMessage],
        system_prompt: Optional[str] = None,
        **kwargs
    ) -> AIResponse:
        """
        Generate a completion from the AI model.

        Args:
            messages: List of conversation messages
            system_prompt: Optional system prompt
            **kwargs: temperature / max_tokens overrides

        Returns:
            AIResponse with the generated content
        """
        pass

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} model={self.config.model}>"
