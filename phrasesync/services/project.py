"""
Project - aggregate root owning one language set per catalog language
"""
import logging
from typing import Dict, Optional, Union

from pydantic import ValidationError

from phrasesync.core.exceptions import InvalidPhraseRowError, LanguageNotFoundError
from phrasesync.models.language_set import LanguageSet
from phrasesync.models.permissions import ProjectPermissions
from phrasesync.models.phrase import Phrase
from phrasesync.models.roles import (
    Role,
    Visibility,
    coerce_role,
    coerce_visibility,
    get_visibility_description,
    get_visibility_title,
    is_role_allowed_to_move_phrases,
)
from phrasesync.schemas.phrase import PhraseRow
from phrasesync.schemas.project import ProjectData
from phrasesync.services.language_catalog import LanguageCatalog
from phrasesync.services.phrase_store import PhraseStore
from phrasesync.services.synchronizer import LanguageSynchronizer, SyncReport

logger = logging.getLogger(__name__)


class Project:
    """
    A localization project.

    Holds one language set per language of the catalog it was built with.
    Loading is not thread-safe: callers must not run load_languages
    concurrently on the same instance.
    """

    def __init__(
        self,
        id: int,
        name: str,
        visibility: Union[int, Visibility],
        default_language: str,
        catalog: LanguageCatalog,
    ):
        self._id = id
        self._name = name
        self._visibility = coerce_visibility(visibility)
        self._default_language = default_language
        self._languages: Dict[str, LanguageSet] = {
            language_id: LanguageSet(language_id)
            for language_id in sorted(catalog.list_known_languages())
        }
        if default_language not in self._languages:
            raise LanguageNotFoundError(default_language, self._languages)

    @classmethod
    def from_record(cls, project_id: int, data: ProjectData, catalog: LanguageCatalog) -> "Project":
        return cls(project_id, data.name, data.visibility, data.default_language, catalog)

    @property
    def id(self) -> int:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def visibility(self) -> Visibility:
        return self._visibility

    @property
    def visibility_title(self) -> str:
        return get_visibility_title(self._visibility)

    @property
    def visibility_description(self) -> str:
        return get_visibility_description(self._visibility)

    @property
    def default_language(self) -> str:
        return self._default_language

    @property
    def languages(self) -> Dict[str, LanguageSet]:
        return dict(self._languages)

    def get_language(self, language_id: str) -> LanguageSet:
        """
        Get the language set for the given language ID

        Raises:
            LanguageNotFoundError: If the project has no such language
        """
        try:
            return self._languages[language_id]
        except KeyError:
            raise LanguageNotFoundError(language_id, self._languages) from None

    def get_permissions(self, user_id: int, role: Union[int, Role]) -> ProjectPermissions:
        return ProjectPermissions(user_id, self._visibility, coerce_role(role))

    def has_user_permissions(
        self,
        user_id: int,
        role: Union[int, Role],
        required_role: Union[int, Role],
    ) -> bool:
        """
        Whether a signed-in user holds at least the required role.

        Args:
            user_id: User ID, 0 or less for anonymous users
            role: The user's role on this project
            required_role: Least privileged role that is still allowed
        """
        if user_id <= 0:
            return False
        permissions = self.get_permissions(user_id, role)
        if permissions.is_invitation_missing():
            return False
        return permissions.role != Role.NONE and permissions.role <= required_role

    @staticmethod
    def is_role_allowed_to_move_phrases(role: Union[int, Role]) -> bool:
        return is_role_allowed_to_move_phrases(role)

    def add_phrase(
        self,
        language_id: str,
        id: Optional[int],
        phrase_key: str,
        payload: str,
        enabled: bool = True,
        is_stub: bool = False,
    ) -> None:
        self.get_language(language_id).add_or_replace(
            Phrase.create(id, phrase_key, payload, enabled, is_stub)
        )

    def remove_phrase(self, language_id: str, phrase_key: str) -> None:
        self.get_language(language_id).remove(phrase_key)

    def normalize_phrase(self, language_id: str, phrase_key: str, reference: Phrase) -> None:
        self.get_language(language_id).normalize(phrase_key, reference)

    def load_languages(self, store: PhraseStore, export_mode: bool = False) -> Dict[str, SyncReport]:
        """
        Load all phrases of this project and synchronize the languages

        Existing language sets are not cleared first, so loading again with
        unchanged store contents leaves the sets unchanged.

        Args:
            store: Source of phrase rows
            export_mode: Produce finalized copies instead of stubs

        Returns:
            Synchronization report per non-default language

        Raises:
            InvalidPhraseRowError: If a row fails validation
            LanguageNotFoundError: If a row belongs to an unknown language
        """
        rows = store.fetch_phrases_for_project(self._id)
        count = 0
        for raw in rows:
            try:
                row = PhraseRow.model_validate(raw)
            except ValidationError as e:
                raise InvalidPhraseRowError(
                    f"Invalid phrase row for project {self._id}",
                    {"errors": e.errors(include_url=False)},
                ) from e
            self.add_phrase(row.language_id, row.id, row.phrase_key, row.payload, row.enabled)
            count += 1

        logger.debug("Loaded %d phrase rows for project %s", count, self._id)

        synchronizer = LanguageSynchronizer(export_mode=export_mode)
        return synchronizer.synchronize(
            self.get_language(self._default_language),
            self._languages.values(),
        )

    def __repr__(self) -> str:
        return f"Project(id={self._id!r}, name={self._name!r}, default_language={self._default_language!r})"
