"""
Google Gemini Provider
Alternate text source for Minutes of Meeting
"""

from typing import Optional, List, Dict, Any

try:
    import google.generativeai as genai
    HAS_GEMINI = True
except ImportError:
    HAS_GEMINI = False

from .base import (
    BaseAIProvider,
    AIProviderType,
    AIMessage,
    AIResponse,
)


class GeminiProvider(BaseAIProvider):
    """
    Google Gemini AI Provider

    Gemini has no separate system role here; the system prompt is prepended
    to the first user message.
    """

    MODELS = {
        "gemini-2.0-flash": "Gemini 2.0 Flash",
        "gemini-1.5-pro": "Gemini 1.5 Pro",
        "gemini-1.5-flash": "Gemini 1.5 Flash",
    }

    DEFAULT_MODEL = "gemini-2.0-flash"

    @property
    def provider_type(self) -> AIProviderType:
        return AIProviderType.GEMINI

    @property
    def supported_models(self) -> List[str]:
        return list(self.MODELS.keys())

    async def initialize(self) -> None:
        """Initialize Gemini client"""
        if not HAS_GEMINI:
            raise ImportError(
                "google-generativeai package not installed. "
                "Run: pip install google-generativeai"
            )

        genai.configure(api_key=self.config.api_key)

        self._client = genai.GenerativeModel(
            model_name=self.config.model,
            generation_config={
                "temperature": self.config.temperature,
                "max_output_tokens": self.config.max_tokens,
            }
        )

    def _convert_messages(
        self,
        messages: List[AIMessage],
        system_prompt: Optional[str] = None
    ) -> List[Dict[str, Any]]:
        """Convert AIMessage to Gemini format"""
        contents = []
        system_text = system_prompt + "\n\n" if system_prompt else ""

        for i, msg in enumerate(messages):
            role = "user" if msg.role == "user" else "model"
            text_content = msg.content
            if i == 0 and system_text:
                text_content = system_text + text_content
            contents.append({"role": role, "parts": [text_content]})

        return contents

    async def complete(
        self,
        messages: List[AIMessage],
        system_prompt: Optional[str] = None,
        **kwargs
    ) -> AIResponse:
        """Generate completion using Gemini"""
        if not self._client:
            await self.initialize()

        contents = self._convert_messages(messages, system_prompt)

        response = await self._client.generate_content_async(
            contents,
            generation_config={
                "temperature": kwargs.get("temperature", self.config.temperature),
                "max_output_tokens": kwargs.get("max_tokens", self.config.max_tokens),
            }
        )

        usage = None
        if getattr(response, 'usage_metadata', None):
            usage = {
                "input_tokens": response.usage_metadata.prompt_token_count,
                "output_tokens": response.usage_metadata.candidates_token_count
            }

        return AIResponse(
            content=response.text,
            model=self.config.model,
            provider=self.provider_type,
            usage=usage,
            finish_reason=response.candidates[0].finish_reason.name if response.candidates else None
        )
