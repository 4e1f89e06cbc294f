"""Typed outcome of a tool invocation."""
from dataclasses import dataclass
from enum import Enum
from typing import Optional

FAILURE_MARKER = "❌ Error:"


class ErrorKind(Enum):
    INITIALIZATION = "initialization"
    REMOTE_CALL = "remote_call"
    INVALID_ARGUMENT = "invalid_argument"
    UNKNOWN_OPERATION = "unknown_operation"
    INTERNAL = "internal"


@dataclass(frozen=True)
class ToolResult:
    """
    Success carries rendered text; ``not_found`` marks a query that matched
    nothing, which is still a success. Failures carry an ``ErrorKind`` and the
    raw error message; ``text`` is what the caller sees.
    """
    text: str
    error: Optional[ErrorKind] = None
    message: Optional[str] = None
    not_found: bool = False

    @property
    def is_error(self) -> bool:
        return self.error is not None

    @classmethod
    def success(cls, text: str) -> "ToolResult":
        return cls(text=text)

    @classmethod
    def missing(cls, text: str) -> "ToolResult":
        return cls(text=text, not_found=True)

    @classmethod
    def failure(cls, kind: ErrorKind, message: str) -> "ToolResult":
        if kind is ErrorKind.UNKNOWN_OPERATION:
            text = message
        else:
            text = f"{FAILURE_MARKER} {message}"
        return cls(text=text, error=kind, message=message)
