"""Row projection of the store for table-style presentation."""

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from transedit.store.flattener import is_empty_branch
from transedit.store.store import TranslationStore

KEY_COLUMN = "key"


@dataclass
class Row:
    key: str
    values: dict[str, Any] = field(default_factory=dict)
    dirty: set[str] = field(default_factory=set)


def as_text(value: Any) -> str:
    if value is None or is_empty_branch(value):
        return ""
    return str(value)


def order_languages(store: TranslationStore) -> list[str]:
    return store.languages


def matches(key: str, values: dict[str, Any], needle: str) -> bool:
    """Case-insensitive substring match on the key or any value."""
    if needle in key.lower():
        return True
    return any(needle in as_text(v).lower() for v in values.values())


def project_rows(
    store: TranslationStore,
    languages: Sequence[str] | None = None,
    filter: str = "",
    sort: str = KEY_COLUMN,
    descending: bool = False,
) -> list[Row]:
    """Rows for every global key, filtered and sorted.

    Sorting is stable: rows with equal values keep ascending key order,
    in both directions.
    """
    if languages is None:
        languages = order_languages(store)

    rows = [
        Row(
            key,
            {lang: store.get_value(lang, key) for lang in languages},
            {lang for lang in languages if store.is_dirty(lang, key)},
        )
        for key in store.keys()
    ]

    needle = filter.lower()
    if needle:
        rows = [row for row in rows if matches(row.key, row.values, needle)]

    if sort == KEY_COLUMN:
        if descending:
            rows.reverse()
        return rows

    rows.sort(key=lambda row: as_text(store.get_value(sort, row.key)), reverse=descending)
    return rows
