"""
Per-language collection of phrases keyed by phrase key.
"""

from dataclasses import replace
from typing import Dict, Iterator, List, Optional

from .phrase import Phrase


class LanguageSet:
    """All phrases of one language within a project"""

    def __init__(self, language_id: str):
        self.language_id = language_id
        self._phrases: Dict[str, Phrase] = {}

    def add_or_replace(self, phrase: Phrase) -> None:
        self._phrases[phrase.key] = phrase

    def remove(self, key: str) -> None:
        self._phrases.pop(key, None)

    def get_by_key(self, key: str) -> Optional[Phrase]:
        return self._phrases.get(key)

    def all(self) -> List[Phrase]:
        """Snapshot of all phrases; safe to iterate while mutating the set."""
        return list(self._phrases.values())

    def keys(self) -> set[str]:
        return set(self._phrases)

    def normalize(self, key: str, reference: Phrase) -> None:
        """
        Pull id, payload and enabled flag from the reference phrase.

        The entry keeps its own key and stub flag. The key must exist;
        a missing key raises KeyError.

        Args:
            key: Key of the entry to normalize
            reference: Phrase from the default language
        """
        current = self._phrases[key]
        self._phrases[key] = replace(
            current,
            id=reference.id,
            payload=reference.payload,
            enabled=reference.enabled,
        )

    def __contains__(self, key: object) -> bool:
        return key in self._phrases

    def __len__(self) -> int:
        return len(self._phrases)

    def __iter__(self) -> Iterator[Phrase]:
        return iter(self.all())

    def __repr__(self) -> str:
        return f"LanguageSet(language_id={self.language_id!r}, phrases={len(self._phrases)})"
