"""
Phrase stores - sources of raw phrase rows for a project
"""
from typing import Any, Callable, Iterable, List, Mapping, Optional, Protocol, runtime_checkable

from sqlalchemy import select
from sqlalchemy.orm import Session

from phrasesync.models.phrase_record import PhraseRecord


@runtime_checkable
class PhraseStore(Protocol):
    def fetch_phrases_for_project(self, project_id: int) -> Iterable[Any]:
        """
        Rows with id, language_id, phrase_key, enabled and payload, either
        as mappings or as objects exposing those attributes.
        """
        ...


class InMemoryPhraseStore:
    """Holds phrase rows in memory, keyed by project"""

    def __init__(self, rows: Optional[Iterable[Mapping[str, Any]]] = None):
        self._rows: List[dict] = [dict(row) for row in rows or []]

    def add_row(
        self,
        project_id: int,
        language_id: str,
        phrase_key: str,
        payload: str,
        enabled: bool = True,
        id: Optional[int] = None,
    ) -> dict:
        row = {
            "id": id if id is not None else len(self._rows) + 1,
            "project_id": project_id,
            "language_id": language_id,
            "phrase_key": phrase_key,
            "enabled": enabled,
            "payload": payload,
        }
        self._rows.append(row)
        return row

    def fetch_phrases_for_project(self, project_id: int) -> List[dict]:
        return [dict(row) for row in self._rows if row.get("project_id") == project_id]


class SqlAlchemyPhraseStore:
    """Read-only store over the phrases table"""

    def __init__(self, session_factory: Optional[Callable[[], Session]] = None):
        if session_factory is None:
            from phrasesync.core.db import get_session_factory
            session_factory = get_session_factory()
        self.session_factory = session_factory

    def fetch_phrases_for_project(self, project_id: int) -> List[PhraseRecord]:
        stmt = (
            select(PhraseRecord)
            .where(PhraseRecord.project_id == project_id)
            .order_by(PhraseRecord.id)
        )
        with self.session_factory() as session:
            return list(session.execute(stmt).scalars().all())
