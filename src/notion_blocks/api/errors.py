"""Typed exception hierarchy for block model errors.

Decode failures carry one DecodeIssue per problem found, each naming the field
path, what the model expected there and what kind of JSON value it received.
"""

from dataclasses import dataclass
from typing import Any, List, Sequence


@dataclass(frozen=True)
class DecodeIssue:
    """One structural problem found while decoding a payload."""

    path: str
    expected: str
    actual: str

    def __str__(self) -> str:
        location = self.path or "<root>"
        return f"{location}: {self.expected} (got {self.actual})"


def json_kind(value: Any) -> str:
    """Name the JSON type of a decoded value."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


class NotionModelError(Exception):
    """Base exception for all errors raised by notion_blocks."""
    pass


class BlockDecodeError(NotionModelError, ValueError):
    """Raised when a payload cannot be decoded into block models."""

    def __init__(self, target: str, issues: Sequence[DecodeIssue]):
        self.target = target
        self.issues: List[DecodeIssue] = list(issues)
        details = "; ".join(str(issue) for issue in self.issues)
        super().__init__(f"Could not decode {target}: {details}")
