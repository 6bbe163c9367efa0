"""
AI-backed alternate text source for Minutes of Meeting.

Produces the plain-text MoM from an external provider. Callers that use it
must fall back to the template renderer when it raises; see
docgen.generator.generate_mom_documents().
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from config.constants import (
    AI_POINT_MAX_TOKENS, OPENAI_COST_PER_1K_TOKENS,
    TOKENS_PER_MOM, TOKENS_PER_POINT,
)
from config.logging_config import get_logger
from docgen.elaboration import elaborate
from docgen.records import MomRecord, resolve_closing_statement

from .base import (
    AIConfig, AIConfigurationError, AIMessage, AIProviderType, AIResponse,
    BaseAIProvider, ExternalGenerationError,
)
from .manager import PROVIDER_INFO, create_provider
from .prompts import (
    MINUTES_SYSTEM_PROMPT, POINT_SYSTEM_PROMPT,
    build_minutes_prompt, build_point_prompt,
)

logger = get_logger(__name__)


@dataclass(frozen=True)
class MinutesRequest:
    """Everything the external source needs to write the minutes."""
    agenda_items: Tuple[str, ...]
    discussion: str
    closing_statement: str

    @classmethod
    def from_record(cls, record: MomRecord) -> "MinutesRequest":
        return cls(
            agenda_items=tuple(record.agenda_items),
            discussion=record.discussion,
            closing_statement=resolve_closing_statement(record),
        )


class MinutesTextSource:
    """
    Generates MoM text through the configured provider.

    Usage:
        source = MinutesTextSource(settings.get_ai_config())
        text = await source.generate_minutes(MinutesRequest.from_record(record))
    """

    def __init__(
        self,
        config: Optional[AIConfig],
        provider: Optional[BaseAIProvider] = None,
        point_max_tokens: int = AI_POINT_MAX_TOKENS,
    ):
        """
        Args:
            config: Provider, credential and model; None disables the source
            provider: Pre-built provider (defaults to one created from config)
            point_max_tokens: Token cap for single-point elaboration
        """
        self.config = config
        self.point_max_tokens = point_max_tokens
        self._provider = provider

    def is_available(self) -> bool:
        return bool(self.config and self.config.api_key)

    @property
    def provider_name(self) -> str:
        if not self.config:
            return "none"
        return PROVIDER_INFO[self.config.provider].name

    def _get_provider(self) -> BaseAIProvider:
        if not self.is_available():
            raise AIConfigurationError('API key not set. Please configure your API key first.')
        if self._provider is None:
            self._provider = create_provider(self.config)
        return self._provider

    async def generate_minutes(self, request: MinutesRequest) -> str:
        """
        Generate the complete MoM text.

        Raises:
            AIConfigurationError: No API key configured
            ExternalGenerationError: Provider call failed or returned nothing
        """
        provider = self._get_provider()
        prompt = build_minutes_prompt(
            request.agenda_items, request.discussion, request.closing_statement
        )

        try:
            response = await provider.complete(
                [AIMessage(role="user", content=prompt)],
                system_prompt=MINUTES_SYSTEM_PROMPT,
            )
        except Exception as e:
            logger.error(f"AI generation failed ({self.provider_name}): {e}")
            raise ExternalGenerationError(
                f"{self.provider_name} API Error: {e}", self.config.provider
            ) from e

        content = (response.content or "").strip()
        if not content:
            raise ExternalGenerationError(
                f"{self.provider_name} returned an empty response", self.config.provider
            )
        self._log_response(response)
        return content

    def _log_response(self, response: AIResponse) -> None:
        tokens = ""
        if response.usage:
            tokens = (
                f" ({response.usage.get('input_tokens', 0)} in / "
                f"{response.usage.get('output_tokens', 0)} out tokens)"
            )
        logger.info(f"AI minutes generated with {response.model}{tokens}")
        if response.truncated:
            logger.warning(
                f"{self.provider_name} stopped at the token limit "
                f"({self.config.max_tokens}); minutes may be incomplete"
            )

    async def elaborate_point(self, point: str) -> str:
        """AI elaboration of one point; rule-based elaboration if unavailable or failing."""
        if not self.is_available():
            return elaborate(point)

        try:
            response = await self._get_provider().complete(
                [AIMessage(role="user", content=build_point_prompt(point))],
                system_prompt=POINT_SYSTEM_PROMPT,
                max_tokens=self.point_max_tokens,
                temperature=0.7,
            )
        except Exception as e:
            logger.warning(f"AI elaboration failed, using rule-based elaboration: {e}")
            return elaborate(point)

        content = (response.content or "").strip()
        return content or elaborate(point)

    def estimate_cost(self, point_count: int) -> str:
        """Rough per-request cost shown before the user opts in."""
        if not self.config or self.config.provider == AIProviderType.GEMINI:
            return 'FREE (Gemini free tier: 60 requests/min)'
        tokens = TOKENS_PER_MOM + point_count * TOKENS_PER_POINT
        cost = (tokens / 1000) * OPENAI_COST_PER_1K_TOKENS
        return '< $0.01 USD' if cost < 0.01 else f'~${cost:.3f} USD'
