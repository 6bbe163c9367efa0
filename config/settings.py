#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Settings - Centralized configuration management
"""

from pathlib import Path
from typing import Optional
from pydantic_settings import BaseSettings

from .constants import (
    DEFAULT_DEPARTMENT, DEFAULT_FONT_SIZE,
    AI_MAX_TOKENS, AI_TEMPERATURE, AI_POINT_MAX_TOKENS,
)


# Base directory
BASE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """Application settings"""

    # ========== API Keys ==========
    google_api_key: str = ""
    openai_api_key: str = ""

    # ========== Alternate text source ==========
    ai_provider: str = "gemini"  # gemini | openai
    gemini_model: str = "gemini-2.0-flash"
    openai_model: str = "gpt-3.5-turbo"
    ai_max_tokens: int = AI_MAX_TOKENS
    ai_temperature: float = AI_TEMPERATURE
    point_max_tokens: int = AI_POINT_MAX_TOKENS

    # ========== Documents ==========
    department: str = DEFAULT_DEPARTMENT
    default_font: str = "serif"  # serif | sans
    default_size: str = DEFAULT_FONT_SIZE

    # ========== Directories ==========
    output_dir: Path = BASE_DIR / "data" / "output"
    preferences_file: Path = BASE_DIR / "data" / "preferences.json"

    class Config:
        env_file = str(BASE_DIR / ".env")
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"  # Allow extra fields from .env that aren't defined in model

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.output_dir.mkdir(exist_ok=True, parents=True)

    def get_api_key(self, provider: Optional[str] = None) -> str:
        """Get API key based on provider"""
        provider = (provider or self.ai_provider).lower()
        if provider == "gemini":
            if not self.google_api_key:
                raise ValueError("GOOGLE_API_KEY not set in .env")
            return self.google_api_key
        elif provider == "openai":
            if not self.openai_api_key:
                raise ValueError("OPENAI_API_KEY not set in .env")
            return self.openai_api_key
        else:
            raise ValueError(f"Unsupported provider: {provider}")

    def get_model(self, provider: Optional[str] = None) -> str:
        provider = (provider or self.ai_provider).lower()
        return self.openai_model if provider == "openai" else self.gemini_model

    def get_ai_config(self, provider: Optional[str] = None, api_key: Optional[str] = None):
        """
        Build the AIConfig value object injected into the alternate text source.

        Args:
            provider: Provider name; defaults to ``ai_provider``
            api_key: Explicit credential (e.g. remembered preference);
                     defaults to the key configured for the provider

        Raises:
            ValueError: If no credential is available for the provider
        """
        from ai_providers.base import AIConfig
        from ai_providers.manager import resolve_provider_type

        ptype = resolve_provider_type(provider or self.ai_provider)
        name = ptype.value
        return AIConfig(
            provider=ptype,
            api_key=api_key or self.get_api_key(name),
            model=self.get_model(name),
            max_tokens=self.ai_max_tokens,
            temperature=self.ai_temperature,
        )

    def print_config(self):
        """Print configuration summary"""
        print("\n" + "=" * 70)
        print("CONFIGURATION")
        print("=" * 70)
        print(f"Provider:        {self.ai_provider}")
        print(f"Model:           {self.get_model()}")
        print(f"Department:      {self.department}")
        print(f"Font / Size:     {self.default_font} / {self.default_size}pt")
        print(f"Output Dir:      {self.output_dir}")
        print("=" * 70 + "\n")


# Global settings instance
settings = Settings()
