"""
Error taxonomy for the tartan engine.

Two families:

Recoverable input errors (``ValueError`` subclasses)
    NotationError, ConstraintError, ArithmeticPreconditionError.  Raised for
    bad user input; callers are expected to catch the specific class and
    report it.

Invariant violations (``StructuralError`` and subclasses)
    StructuralError, ExportPreconditionError.  Raised when components are
    wired together inconsistently (an out-of-range weave index, an empty sett
    handed to expansion).  These indicate a programming error and should not
    be caught by UI code.
"""

from __future__ import annotations

from enum import Enum


class TartanismError(Exception):
    """Base class for every error raised by the tartan engine."""


class NotationErrorKind(str, Enum):
    """Distinct ways a threadcount string can fail to parse."""

    EMPTY = "EMPTY"
    INVALID_COUNT = "INVALID_COUNT"
    MISSING_COLOR = "MISSING_COLOR"


class NotationError(TartanismError, ValueError):
    """A threadcount string (or one of its tokens) is malformed.

    Attributes:
        kind: Which rule the input broke.
        token: The offending token, or ``""`` for empty input.
        position: Zero-based token index, or ``None`` for empty input.
    """

    def __init__(
        self,
        kind: NotationErrorKind,
        message: str,
        token: str = "",
        position: int | None = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.token = token
        self.position = position


class ConstraintError(TartanismError, ValueError):
    """Generator constraints are invalid or cannot be satisfied.

    Attributes:
        field: Name of the constraint field at fault.
    """

    def __init__(self, field: str, message: str) -> None:
        super().__init__(f"{field}: {message}")
        self.field = field


class StructuralError(TartanismError):
    """An internal invariant between components has been violated."""


class ExportPreconditionError(StructuralError):
    """A sett/weave pair cannot be serialized to a loom draft."""


class ArithmeticPreconditionError(TartanismError, ValueError):
    """A production calculation would divide by zero or a non-positive quantity."""


class WifReadError(TartanismError, ValueError):
    """A loom-draft file is missing a section or holds a malformed value.

    Attributes:
        section: The WIF section at fault.
    """

    def __init__(self, section: str, message: str) -> None:
        super().__init__(f"[{section}] {message}")
        self.section = section
