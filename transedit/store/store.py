"""In-memory translation store: flattened languages, global key set, dirty state."""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from transedit.errors import InvalidKey
from transedit.store.dirty import DirtyTracker, Mark, Snapshot
from transedit.store.flattener import (
    FlatLanguageMap,
    LanguageTree,
    flatten,
    set_leaf,
    unflatten,
)

logger = logging.getLogger(__name__)

DEFAULT_MAIN_LANGUAGE = "en"


@dataclass(frozen=True)
class SaveRequest:
    """A save in flight: its scope, the marks it covers and the payload sent."""

    key: str | None
    snapshot: Snapshot
    payload: dict[str, Any] = field(default_factory=dict)


class TranslationStore:
    def __init__(self, main_lang: str = DEFAULT_MAIN_LANGUAGE) -> None:
        self.main_lang = main_lang
        self._flat: dict[str, FlatLanguageMap] = {}
        self._keys: set[str] = set()
        self.dirty = DirtyTracker()

    @classmethod
    def load(
        cls,
        snapshot: Mapping[str, Mapping[str, Any]],
        main_lang: str = DEFAULT_MAIN_LANGUAGE,
        all_keys: Iterable[str] | None = None,
    ) -> "TranslationStore":
        """Build a store from per-language nested trees.

        `all_keys` is only a hint: the global key set is always recomputed
        from the flattened data.
        """
        store = cls(main_lang)
        for lang, tree in snapshot.items():
            flat = flatten(tree)
            store._flat[lang] = flat
            store._keys.update(flat)

        if all_keys is not None:
            hinted = set(all_keys)
            if hinted != store._keys:
                logger.warning(
                    "Key hint differs from loaded data: %d hinted, %d computed",
                    len(hinted),
                    len(store._keys),
                )
        logger.info(
            "Loaded %d languages, %d keys (main=%s)",
            len(store._flat),
            len(store._keys),
            main_lang,
        )
        return store

    # -- reads ---------------------------------------------------------------

    @property
    def languages(self) -> list[str]:
        """Language codes, main language first, the rest ascending."""
        return sorted(self._flat, key=lambda lang: (lang != self.main_lang, lang))

    def keys(self) -> list[str]:
        return sorted(self._keys)

    def get_value(self, lang: str, key: str) -> Any:
        """Current value, or '' when the key is untranslated in `lang`."""
        return self._flat.get(lang, {}).get(key, "")

    def flat(self, lang: str) -> FlatLanguageMap:
        return dict(self._flat.get(lang, {}))

    # -- writes --------------------------------------------------------------

    def set_value(self, lang: str, key: str, value: Any) -> None:
        flat = self._flat.get(lang, {})
        filled = set_leaf(flat, key, value)
        self._flat.setdefault(lang, flat)
        self._keys.add(key)
        for ancestor in filled:
            self.dirty.discard(lang, ancestor)
            if not any(ancestor in other for other in self._flat.values()):
                self._keys.discard(ancestor)
        self.dirty.mark(lang, key)

    def list_dirty(self) -> frozenset[Mark]:
        return self.dirty.marks()

    def is_dirty(self, lang: str, key: str) -> bool:
        return self.dirty.is_dirty(lang, key)

    # -- saving --------------------------------------------------------------

    def build_full_save_payload(self) -> dict[str, LanguageTree]:
        return {lang: unflatten(flat) for lang, flat in self._flat.items()}

    def build_key_save_payload(self, key: str) -> dict[str, Any]:
        if key not in self._keys:
            raise InvalidKey(key, "unknown key")
        return {lang: self.get_value(lang, key) for lang in self.languages}

    def begin_save(self, key: str | None = None) -> SaveRequest:
        """Snapshot the dirty marks in scope and build the matching payload."""
        if key is None:
            payload: dict[str, Any] = {"translations": self.build_full_save_payload()}
        else:
            payload = {"key": key, "values": self.build_key_save_payload(key)}
        request = SaveRequest(key=key, snapshot=self.dirty.snapshot(key), payload=payload)
        logger.debug(
            "Save started (scope=%s, %d marks)", key or "full", len(request.snapshot)
        )
        return request

    def commit_save(self, request: SaveRequest) -> None:
        """Confirm a save: clear only the marks captured when it started."""
        cleared = self.dirty.clear(request.snapshot)
        logger.info(
            "Save committed (scope=%s): %d marks cleared, %d still dirty",
            request.key or "full",
            cleared,
            self.dirty.count,
        )

    def abort_save(self, request: SaveRequest) -> None:
        logger.warning(
            "Save aborted (scope=%s): %d marks kept",
            request.key or "full",
            len(request.snapshot),
        )
