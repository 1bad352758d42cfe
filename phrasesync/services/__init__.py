# Business logic services

from .synchronizer import LanguageSynchronizer, SyncReport
from .language_catalog import LanguageCatalog, StaticLanguageCatalog
from .phrase_store import PhraseStore, InMemoryPhraseStore, SqlAlchemyPhraseStore
from .project import Project

__all__ = [
    'LanguageSynchronizer',
    'SyncReport',
    'LanguageCatalog',
    'StaticLanguageCatalog',
    'PhraseStore',
    'InMemoryPhraseStore',
    'SqlAlchemyPhraseStore',
    'Project',
]
