"""Dotted flat key <-> nested path conversion."""

from transedit.errors import InvalidKey, InvalidSegment

DELIMITER = "."

Path = tuple[str, ...]


def encode(path: Path) -> str:
    """Join path segments into a flat key: ('a', 'b') -> 'a.b'."""
    path = tuple(path)
    if not path:
        raise InvalidSegment("", path)
    for segment in path:
        if not segment or DELIMITER in segment:
            raise InvalidSegment(segment, path)
    return DELIMITER.join(path)


def decode(key: str) -> Path:
    """Split a flat key into its path: 'a.b' -> ('a', 'b')."""
    parts = tuple(key.split(DELIMITER))
    if any(not part for part in parts):
        raise InvalidKey(key)
    return parts


def is_prefix(shorter: Path, longer: Path) -> bool:
    """True if `shorter` is a strict ancestor path of `longer`."""
    return len(shorter) < len(longer) and longer[: len(shorter)] == shorter
