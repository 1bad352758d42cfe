"""
Language catalog - the fixed set of languages a project can hold
"""
from typing import Iterable, Optional, Protocol, runtime_checkable

from phrasesync.config import Settings, get_settings


@runtime_checkable
class LanguageCatalog(Protocol):
    def list_known_languages(self) -> set[str]:
        ...


class StaticLanguageCatalog:
    """Catalog backed by a fixed collection of language IDs"""

    def __init__(self, languages: Iterable[str]):
        self._languages = frozenset(languages)

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "StaticLanguageCatalog":
        settings = settings or get_settings()
        return cls(settings.get_supported_languages())

    def list_known_languages(self) -> set[str]:
        return set(self._languages)
