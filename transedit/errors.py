"""Error taxonomy for the translation store and its storage collaborator."""


class TranslationError(Exception):
    """Base class for every error raised by transedit."""


class InvalidSegment(TranslationError):
    def __init__(self, segment: str, path: tuple[str, ...] | None = None):
        self.segment = segment
        self.path = path
        where = f" in path {list(path)!r}" if path is not None else ""
        super().__init__(f"Invalid key segment {segment!r}{where}")


class InvalidKey(TranslationError):
    def __init__(self, key: str, reason: str = "empty segment"):
        self.key = key
        self.reason = reason
        super().__init__(f"Invalid flat key {key!r}: {reason}")


class LoadFailure(TranslationError):
    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)


class SaveFailure(TranslationError):
    def __init__(
        self,
        message: str,
        key: str | None = None,
        status_code: int | None = None,
    ):
        self.key = key
        self.status_code = status_code
        super().__init__(message)
