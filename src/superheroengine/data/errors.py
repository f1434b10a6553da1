"""Data-layer and request-boundary exceptions."""

from pathlib import Path
from typing import Any, Sequence


class SuperheroEngineError(Exception):
    """Base for everything this package raises on purpose."""


class DataLoadError(SuperheroEngineError):
    """Raised when the hero JSON cannot be read, parsed, or has the wrong shape."""

    def __init__(self, message: str, path: Path | str | None = None) -> None:
        super().__init__(message)
        self.path = str(path) if path is not None else None


class InvalidHeroRecordError(SuperheroEngineError):
    """Raised when a single hero record has no usable id."""

    def __init__(self, message: str, record: Any = None) -> None:
        super().__init__(message)
        self.record = record


class InvalidRequestError(SuperheroEngineError):
    """Comparison ids missing or non-numeric. Detected before any lookup or comparison."""

    status = "invalid_request"

    def __init__(self, message: str, *, field: str | None = None, value: Any = None) -> None:
        super().__init__(message)
        self.field = field
        self.value = value


class HeroNotFoundError(SuperheroEngineError):
    """One or more hero ids do not resolve in the store."""

    status = "not_found"

    def __init__(self, message: str, *, missing_ids: Sequence[Any] | None = None) -> None:
        super().__init__(message)
        self.missing_ids = list(missing_ids or [])
