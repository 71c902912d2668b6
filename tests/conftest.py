"""Shared fixtures: sample trees, a loaded store and a temp translations dir."""

import json

import pytest

from transedit.config import settings
from transedit.store.store import TranslationStore


@pytest.fixture
def sample_trees() -> dict:
    return {
        "en": {"greeting": {"hello": "Hello", "bye": "Bye"}, "farewell": "Farewell"},
        "fr": {"greeting": {"hello": "Bonjour"}},
        "de": {"farewell": "Lebewohl"},
    }


@pytest.fixture
def store(sample_trees) -> TranslationStore:
    return TranslationStore.load(sample_trees, "en")


@pytest.fixture
def translations_dir(tmp_path, monkeypatch):
    """Point the storage API at a temp dir holding en.json and fr.json."""
    directory = tmp_path / "translations"
    directory.mkdir()
    (directory / "en.json").write_text(
        json.dumps({"greeting": {"hello": "Hello"}, "farewell": "Farewell"}),
        encoding="utf-8",
    )
    (directory / "fr.json").write_text(json.dumps({}), encoding="utf-8")
    monkeypatch.setattr(settings, "translations_dir", str(directory))
    monkeypatch.setattr(settings, "main_language", "en")
    return directory
