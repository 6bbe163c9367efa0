"""
Remembered provider choice and credential.

The alternate text source never reads global state; callers load the saved
preference and turn it into an AIConfig.
"""

import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional, Tuple

from config.logging_config import get_logger

from .base import AIProviderType
from .manager import resolve_provider_type

logger = get_logger(__name__)

API_KEY_KEY = 'ai_api_key'
PROVIDER_KEY = 'ai_provider'


class KeyValueStore(ABC):
    """Minimal string key-value persistence."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        pass

    @abstractmethod
    def remove(self, key: str) -> None:
        pass


class MemoryStore(KeyValueStore):
    def __init__(self, data: Optional[Dict[str, str]] = None):
        self._data = dict(data or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)


class JsonFileStore(KeyValueStore):
    """Key-value pairs kept in a single JSON object on disk."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def _read(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding='utf-8'))
        except (json.JSONDecodeError, UnicodeDecodeError, OSError) as e:
            logger.warning(f"Ignoring unreadable preferences file {self.path}: {e}")
            return {}
        return data if isinstance(data, dict) else {}

    def _write(self, data: Dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, indent=2), encoding='utf-8')

    def get(self, key: str) -> Optional[str]:
        return self._read().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self._write(data)

    def remove(self, key: str) -> None:
        data = self._read()
        if key in data:
            del data[key]
            self._write(data)


class ProviderPreferences:
    """Save, load and clear the user's last provider and API key."""

    def __init__(self, store: KeyValueStore):
        self.store = store

    def save(self, provider, api_key: str) -> None:
        ptype = resolve_provider_type(provider)
        self.store.set(API_KEY_KEY, api_key)
        self.store.set(PROVIDER_KEY, ptype.value)

    def load(self) -> Optional[Tuple[AIProviderType, str]]:
        """Saved (provider, api_key), or None when no key was saved."""
        api_key = self.store.get(API_KEY_KEY)
        if not api_key:
            return None
        saved = self.store.get(PROVIDER_KEY) or AIProviderType.GEMINI.value
        try:
            ptype = resolve_provider_type(saved)
        except ValueError:
            ptype = AIProviderType.GEMINI
        return ptype, api_key

    def clear(self) -> None:
        self.store.remove(API_KEY_KEY)
        self.store.remove(PROVIDER_KEY)
