"""Error types for input generation."""

from __future__ import annotations


class TraceGenError(Exception):
    """Base class for errors raised by tracegen."""


class UnsupportedSampleType(TraceGenError, TypeError):
    """Error raised when a random source cannot sample the requested kind.

    The offending kind is preserved for debugging purposes.
    """

    def __init__(self, message: str, kind: object) -> None:
        self.kind = kind
        super().__init__(message)

    def __repr__(self) -> str:
        return f"UnsupportedSampleType({super().__repr__()}, kind={self.kind!r})"
