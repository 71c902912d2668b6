"""Hierarchical translation store."""

from transedit.store.codec import DELIMITER, decode, encode
from transedit.store.dirty import DirtyTracker
from transedit.store.flattener import flatten, unflatten
from transedit.store.store import SaveRequest, TranslationStore
from transedit.store.view import Row, project_rows

__all__ = [
    "DELIMITER",
    "DirtyTracker",
    "Row",
    "SaveRequest",
    "TranslationStore",
    "decode",
    "encode",
    "flatten",
    "project_rows",
    "unflatten",
]
