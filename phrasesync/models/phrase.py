"""
Phrase value object: one translatable string for one language.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Phrase:
    """A single phrase entry, joined across languages by its key"""
    id: Optional[int]
    key: str
    payload: str
    enabled: bool = True
    is_stub: bool = False

    def __post_init__(self):
        """Validate phrase data"""
        if not self.key:
            raise ValueError("Phrase key must not be empty")

    @classmethod
    def create(
        cls,
        id: Optional[int],
        key: str,
        payload: str,
        enabled: bool = True,
        is_stub: bool = False,
    ) -> "Phrase":
        return cls(id=id, key=key, payload=payload, enabled=enabled, is_stub=is_stub)
