"""JSON file storage: one nested `<lang>.json` tree per language."""

import json
import logging
import re
from pathlib import Path
from typing import Any

from transedit.store.codec import decode
from transedit.store.flattener import flatten, set_leaf, unflatten

logger = logging.getLogger(__name__)

_LANG_RE = re.compile(r"^[A-Za-z]{2,3}([_-][A-Za-z0-9]+)*$")


class InvalidLanguage(ValueError):
    def __init__(self, lang: str):
        self.lang = lang
        super().__init__(f"Invalid language code: {lang!r}")


def _lang_file(directory: Path, lang: str) -> Path:
    if not _LANG_RE.match(lang):
        raise InvalidLanguage(lang)
    return directory / f"{lang}.json"


def read_language(directory: Path, lang: str) -> dict[str, Any]:
    file_path = _lang_file(directory, lang)
    if not file_path.exists():
        return {}
    with open(file_path, encoding="utf-8") as f:
        return json.load(f)


def read_all(directory: Path) -> dict[str, dict[str, Any]]:
    """Load every `<lang>.json` in the directory."""
    if not directory.is_dir():
        return {}
    return {
        path.stem: read_language(directory, path.stem)
        for path in sorted(directory.glob("*.json"))
        if _LANG_RE.match(path.stem)
    }


def write_language(directory: Path, lang: str, tree: dict[str, Any]) -> None:
    file_path = _lang_file(directory, lang)
    directory.mkdir(parents=True, exist_ok=True)
    tmp_path = file_path.with_suffix(".json.tmp")
    with open(tmp_path, "w", encoding="utf-8") as f:
        json.dump(tree, f, ensure_ascii=False, indent=2, sort_keys=True)
        f.write("\n")
    tmp_path.replace(file_path)


def write_all(directory: Path, translations: dict[str, dict[str, Any]]) -> None:
    # Validate everything before touching any file
    for lang, tree in translations.items():
        _lang_file(directory, lang)
        flatten(tree)
    for lang, tree in translations.items():
        write_language(directory, lang, tree)
    logger.info("Wrote %d languages to %s", len(translations), directory)


def write_key(directory: Path, key: str, values: dict[str, Any]) -> None:
    """Set one flat key in each posted language, keeping the rest of the tree.

    An empty value for a language that never had the key is not written.
    """
    decode(key)
    updated: dict[str, dict[str, Any]] = {}
    for lang, value in values.items():
        flat = flatten(read_language(directory, lang))
        if key not in flat and value == "":
            continue
        set_leaf(flat, key, value)
        updated[lang] = unflatten(flat)
    for lang, tree in updated.items():
        write_language(directory, lang, tree)
    logger.info("Wrote key %s for %d languages", key, len(updated))
