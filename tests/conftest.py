"""
Shared fixtures for the phrasesync test suite
"""
import pytest

from phrasesync.models.roles import Visibility
from phrasesync.services.language_catalog import StaticLanguageCatalog
from phrasesync.services.phrase_store import InMemoryPhraseStore
from phrasesync.services.project import Project


@pytest.fixture
def catalog():
    return StaticLanguageCatalog(["en", "fr", "de"])


@pytest.fixture
def store():
    return InMemoryPhraseStore()


@pytest.fixture
def project(catalog):
    return Project(1, "Demo App", Visibility.PUBLIC, "en", catalog)


@pytest.fixture
def snapshot():
    """Comparable view of a language set's contents"""
    def _snapshot(language_set):
        return {
            p.key: (p.id, p.payload, p.enabled, p.is_stub)
            for p in language_set.all()
        }
    return _snapshot
