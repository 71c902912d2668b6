"""Nested language tree <-> flat {'a.b.c': value} mapping."""

from collections.abc import Collection, Mapping
from typing import Any

from transedit.errors import InvalidKey
from transedit.store.codec import Path, decode, encode, is_prefix

LanguageTree = dict[str, Any]
FlatLanguageMap = dict[str, Any]


def is_branch(node: Any) -> bool:
    """Only mappings are branches; lists and scalars are opaque leaves."""
    return isinstance(node, Mapping)


def is_empty_branch(node: Any) -> bool:
    return is_branch(node) and not node


def flatten(tree: Mapping[str, Any], prefix: Path = ()) -> FlatLanguageMap:
    """Flatten nested dict: {'a': {'b': 'c'}} -> {'a.b': 'c'}.

    Keys that are empty or contain the delimiter raise InvalidSegment.
    An empty sub-object is kept as a {} leaf at its path so it survives
    a round trip.
    """
    items: FlatLanguageMap = {}
    for segment, node in tree.items():
        path = (*prefix, segment)
        if is_branch(node) and node:
            items.update(flatten(node, path))
        else:
            items[encode(path)] = {} if is_branch(node) else node
    return items


def unflatten(flat: Mapping[str, Any]) -> LanguageTree:
    """Rebuild the nested tree from flat keys: {'a.b': 'c'} -> {'a': {'b': 'c'}}.

    A key that is a strict prefix of another key ('a' and 'a.b') cannot be
    represented as a tree and raises InvalidKey, whatever the key order.
    """
    tree: LanguageTree = {}
    leaves: dict[Path, str] = {}
    branches: dict[Path, str] = {}

    for key, value in flat.items():
        path = decode(key)
        node = tree
        for depth, segment in enumerate(path[:-1], start=1):
            prefix = path[:depth]
            if prefix in leaves:
                raise InvalidKey(key, f"collides with leaf key {leaves[prefix]!r}")
            branches.setdefault(prefix, key)
            node = node.setdefault(segment, {})
        if path in branches:
            raise InvalidKey(key, f"collides with nested key {branches[path]!r}")
        leaves[path] = key
        node[path[-1]] = {} if is_empty_branch(value) else value

    return tree


def find_collision(
    flat: Mapping[str, Any], key: str, ignore: Collection[str] = ()
) -> str | None:
    """Return an existing key in `flat` that `key` would collide with, if any."""
    path = decode(key)
    for other in flat:
        if other == key or other in ignore:
            continue
        other_path = decode(other)
        if is_prefix(path, other_path) or is_prefix(other_path, path):
            return other
    return None


def set_leaf(flat: FlatLanguageMap, key: str, value: Any) -> list[str]:
    """Write `key` into `flat`, refusing prefix collisions.

    Empty-object leaves above `key` are filled in rather than treated as
    collisions; their keys are removed and returned.
    """
    path = decode(key)
    filled: list[str] = []
    if key not in flat:
        filled = [
            ancestor
            for ancestor in (encode(path[:depth]) for depth in range(1, len(path)))
            if is_empty_branch(flat.get(ancestor))
        ]
        other = find_collision(flat, key, ignore=filled)
        if other is not None:
            raise InvalidKey(key, f"collides with {other!r}")
    for ancestor in filled:
        del flat[ancestor]
    flat[key] = value
    return filled
