"""Typed errors for argument validation.

Each error carries the process exit status it maps to. Only the command-line
entry point turns these into a status; library callers can catch
:class:`RangeFilterError` directly.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar


@dataclass
class RangeFilterError(Exception):
    """Base error for rangefilter.

    Attributes:
        message: Human-readable error description.
        cause: Optional underlying exception that caused this error.
    """

    exit_status: ClassVar[int] = -2

    message: str
    cause: Exception | None = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class MissingArgumentsError(RangeFilterError):
    """No ``--from``/``--to`` flag was supplied."""

    exit_status: ClassVar[int] = -1


@dataclass
class InvalidArgumentsError(RangeFilterError):
    """Too many, unrecognized, duplicate or malformed arguments.

    Attributes:
        argument: The token that made the argument list invalid, if any.
    """

    exit_status: ClassVar[int] = -2

    argument: str = ""
