"""
Pytest configuration and shared fixtures for Notice & MOM generator tests.
"""
import sys
import pytest
from pathlib import Path
from typing import Optional
from unittest.mock import AsyncMock

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from ai_providers.base import (
    AIConfig,
    AIProviderType,
    AIResponse,
    BaseAIProvider,
)
from docgen.records import MomRecord, NoticeRecord


# ============================================================================
# Fixtures: Sample Records
# ============================================================================

@pytest.fixture
def notice_record():
    """Complete notice for 08 January 2025 (a Wednesday)."""
    return NoticeRecord(
        date="08 January 2025",
        time="11:00 AM",
        venue="Seminar Hall",
        agenda="NBA documentation",
        include_day=True,
    )


@pytest.fixture
def mom_record():
    """Complete MOM with two agenda items and three discussion points."""
    return MomRecord(
        date="15 March 2025",
        time="10:30 AM",
        venue="Conference Room",
        agenda_items=["Faculty workload", "Syllabus revision"],
        discussion="- review workload distribution\n2. Lab timings\n• discuss exam schedule",
    )


# ============================================================================
# Fixtures: AI Providers
# ============================================================================

class FakeProvider(BaseAIProvider):
    """In-memory provider returning a canned reply or raising a canned error."""

    def __init__(self, config: AIConfig, reply: str = "", error: Optional[Exception] = None,
                 usage: Optional[dict] = None, finish_reason: Optional[str] = None):
        super().__init__(config)
        self.reply = reply
        self.error = error
        self.usage = usage
        self.finish_reason = finish_reason
        self.calls = []

    @property
    def provider_type(self) -> AIProviderType:
        return self.config.provider

    @property
    def supported_models(self):
        return [self.config.model]

    async def initialize(self) -> None:
        pass

    async def complete(self, messages, system_prompt=None, **kwargs) -> AIResponse:
        self.calls.append({"messages": messages, "system_prompt": system_prompt, **kwargs})
        if self.error:
            raise self.error
        return AIResponse(
            content=self.reply,
            model=self.config.model,
            provider=self.config.provider,
            usage=self.usage,
            finish_reason=self.finish_reason,
        )


@pytest.fixture
def gemini_config():
    return AIConfig(provider=AIProviderType.GEMINI, api_key="test_google_key", model="gemini-2.0-flash")


@pytest.fixture
def openai_config():
    return AIConfig(provider=AIProviderType.OPENAI, api_key="test_openai_key", model="gpt-3.5-turbo")


@pytest.fixture
def fake_provider_factory():
    """Build FakeProvider instances: fake_provider_factory(config, reply=..., error=...)."""
    return FakeProvider


@pytest.fixture
def mock_text_source():
    """Text source whose generate_minutes is an AsyncMock."""
    source = AsyncMock()
    source.generate_minutes = AsyncMock(return_value="AI MINUTES")
    return source
