"""
Integration tests for loading a project's phrases and synchronizing its languages
"""
import pytest

from phrasesync.core.exceptions import InvalidPhraseRowError, LanguageNotFoundError
from phrasesync.models.phrase import Phrase
from phrasesync.services.language_catalog import StaticLanguageCatalog
from phrasesync.services.project import Project


def test_empty_store_leaves_all_languages_empty(project, store):
    reports = project.load_languages(store)

    assert all(len(s) == 0 for s in project.languages.values())
    assert set(reports) == {"fr", "de"}


def test_rows_are_grouped_by_language(project, store):
    store.add_row(1, "en", "greeting", "Hello", id=1)
    store.add_row(1, "fr", "greeting", "Bonjour", id=2)
    store.add_row(2, "fr", "other_project", "Ignored", id=3)

    project.load_languages(store)

    assert project.get_language("en").get_by_key("greeting") == Phrase.create(1, "greeting", "Hello")
    assert project.get_language("fr").get_by_key("greeting") == Phrase.create(2, "greeting", "Bonjour")
    assert project.get_language("fr").get_by_key("other_project") is None


def test_live_edit_backfills_stub(project, store, snapshot):
    store.add_row(1, "en", "greeting", "Hello", id=1)

    project.load_languages(store, export_mode=False)
    assert snapshot(project.get_language("fr")) == {"greeting": (1, "Hello", True, True)}

    # a later export load keeps the stub flag of the earlier backfill
    project.load_languages(store, export_mode=True)
    assert snapshot(project.get_language("fr")) == {"greeting": (1, "Hello", True, True)}


def test_live_edit_prunes_stale_and_keeps_translation(project, store, snapshot):
    store.add_row(1, "en", "a", "X", id=1)
    store.add_row(1, "fr", "a", "Y", id=2)
    store.add_row(1, "fr", "b", "Z", id=3)

    project.load_languages(store, export_mode=False)

    assert snapshot(project.get_language("fr")) == {"a": (2, "Y", True, False)}


def test_export_prunes_stale_and_overwrites_translation(project, store, snapshot):
    store.add_row(1, "en", "a", "X", id=1)
    store.add_row(1, "fr", "a", "Y", id=2)
    store.add_row(1, "fr", "b", "Z", id=3)

    project.load_languages(store, export_mode=True)

    assert snapshot(project.get_language("fr")) == {"a": (1, "X", True, False)}


def test_export_enables_disabled_translation(project, store, snapshot):
    store.add_row(1, "en", "a", "X", id=1)
    store.add_row(1, "fr", "a", "Y", enabled=False, id=2)

    project.load_languages(store, export_mode=True)

    assert snapshot(project.get_language("fr")) == {"a": (1, "X", True, False)}


def test_export_backfills_finalized_copies(project, store, snapshot):
    store.add_row(1, "en", "save", "Save", enabled=False, id=1)

    project.load_languages(store, export_mode=True)

    assert snapshot(project.get_language("de")) == {"save": (1, "Save", False, False)}


def test_default_language_is_untouched(project, store, snapshot):
    store.add_row(1, "en", "a", "X", id=1)
    store.add_row(1, "fr", "only_in_fr", "Z", id=2)

    project.load_languages(store, export_mode=True)

    assert snapshot(project.get_language("en")) == {"a": (1, "X", True, False)}


@pytest.mark.parametrize("export_mode", [False, True])
def test_loading_twice_is_idempotent(project, store, snapshot, export_mode):
    store.add_row(1, "en", "a", "X", id=1)
    store.add_row(1, "en", "c", "Cancel", id=2)
    store.add_row(1, "fr", "a", "Y", id=3)
    store.add_row(1, "de", "stale", "Alt", id=4)

    project.load_languages(store, export_mode=export_mode)
    first = {lang: snapshot(s) for lang, s in project.languages.items()}
    project.load_languages(store, export_mode=export_mode)
    second = {lang: snapshot(s) for lang, s in project.languages.items()}

    assert first == second


@pytest.mark.parametrize("export_mode", [False, True])
def test_key_sets_follow_default_language(project, store, export_mode):
    store.add_row(1, "en", "a", "X", id=1)
    store.add_row(1, "en", "c", "Cancel", id=2)
    store.add_row(1, "fr", "a", "Y", id=3)
    store.add_row(1, "de", "stale", "Alt", id=4)

    project.load_languages(store, export_mode=export_mode)

    default_keys = project.get_language("en").keys()
    for language_id in ("fr", "de"):
        keys = project.get_language(language_id).keys()
        assert keys <= default_keys
        if not export_mode:
            assert keys == default_keys


def test_row_for_unknown_language_raises(project, store):
    store.add_row(1, "xx", "a", "X", id=1)

    with pytest.raises(LanguageNotFoundError):
        project.load_languages(store)


def test_invalid_row_raises(project):
    class BrokenStore:
        def fetch_phrases_for_project(self, project_id):
            return [{"id": 1, "language_id": "en", "phrase_key": "", "payload": "X", "enabled": True}]

    with pytest.raises(InvalidPhraseRowError) as exc_info:
        project.load_languages(BrokenStore())

    assert exc_info.value.details["errors"]


def test_integer_flags_and_language_ids_are_coerced(store, snapshot):
    numeric = Project(1, "Numeric", 1, "1", StaticLanguageCatalog(["1", "2"]))
    store.add_row(1, 1, "a", "X", enabled=1, id=1)

    numeric.load_languages(store)

    assert snapshot(numeric.get_language("2")) == {"a": (1, "X", True, True)}
