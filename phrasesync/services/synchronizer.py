"""
Language Synchronizer - keeps every language aligned with the default language
"""
import logging
from dataclasses import dataclass
from typing import Dict, Iterable

from phrasesync.models.language_set import LanguageSet
from phrasesync.models.phrase import Phrase

logger = logging.getLogger(__name__)


@dataclass
class SyncReport:
    """Changes applied to one language set during synchronization"""
    language_id: str
    removed: int = 0
    normalized: int = 0
    added: int = 0

    @property
    def changed(self) -> bool:
        return bool(self.removed or self.normalized or self.added)


class LanguageSynchronizer:
    """
    Reconciles non-default language sets against the default language set.

    In export mode, phrases shared with the default language are overwritten
    with the default language's id, payload and enabled flag, and missing
    phrases are added as finalized copies. In live-edit mode, existing
    phrases are left alone and missing phrases are added as stubs.
    """

    def __init__(self, export_mode: bool = False):
        self.export_mode = export_mode

    def synchronize(
        self,
        default_set: LanguageSet,
        language_sets: Iterable[LanguageSet],
    ) -> Dict[str, SyncReport]:
        """
        Synchronize every language set except the default one

        Args:
            default_set: Language set of the default language
            language_sets: All language sets of the project; the default
                set may be included and is skipped

        Returns:
            Mapping of language ID to the changes applied
        """
        reports: Dict[str, SyncReport] = {}
        for language_set in language_sets:
            if language_set is default_set or language_set.language_id == default_set.language_id:
                continue
            reports[language_set.language_id] = self.synchronize_language(default_set, language_set)

        logger.info(
            "Synchronized languages",
            extra={
                "default_language": default_set.language_id,
                "export_mode": self.export_mode,
                "languages": len(reports),
                "removed": sum(r.removed for r in reports.values()),
                "normalized": sum(r.normalized for r in reports.values()),
                "added": sum(r.added for r in reports.values()),
            },
        )
        return reports

    def synchronize_language(self, default_set: LanguageSet, language_set: LanguageSet) -> SyncReport:
        report = SyncReport(language_id=language_set.language_id)

        # prune and normalize run over a snapshot taken before any removal
        for phrase in language_set.all():
            reference = default_set.get_by_key(phrase.key)
            if reference is None:
                language_set.remove(phrase.key)
                report.removed += 1
            elif self.export_mode:
                language_set.normalize(phrase.key, reference)
                report.normalized += 1

        for reference in default_set.all():
            if language_set.get_by_key(reference.key) is None:
                language_set.add_or_replace(
                    Phrase.create(
                        reference.id,
                        reference.key,
                        reference.payload,
                        reference.enabled,
                        is_stub=not self.export_mode,
                    )
                )
                report.added += 1

        logger.debug(
            "Synchronized language %s: removed=%d normalized=%d added=%d",
            report.language_id,
            report.removed,
            report.normalized,
            report.added,
        )
        return report
