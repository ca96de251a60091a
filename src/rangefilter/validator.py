"""Command-line argument validation.

Turns the raw argument list into a :class:`RangeSpec` before any input is
read. Two failure kinds exist: no flags at all, and everything else that is
not one or two distinct ``--from=N`` / ``--to=N`` flags.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Sequence

from .errors import InvalidArgumentsError, MissingArgumentsError

logger = logging.getLogger(__name__)

FROM_FLAG = "--from="
TO_FLAG = "--to="
MAX_ARGUMENTS = 2

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")

Bound = int | None


def parse_integer(text: str) -> int | None:
    """Parse a signed decimal literal, returning ``None`` if ``text`` is not one.

    Literals longer than the interpreter's integer string conversion limit
    count as not being integers.
    """

    if _INTEGER_RE.fullmatch(text) is None:
        return None
    try:
        return int(text)
    except ValueError:
        return None


@dataclass(frozen=True)
class RangeSpec:
    """An inclusive range whose sides may be unbounded.

    Attributes:
        lower: Smallest accepted value, or ``None`` for no lower limit.
        upper: Largest accepted value, or ``None`` for no upper limit.
    """

    lower: Bound = None
    upper: Bound = None

    def contains(self, value: int) -> bool:
        if self.lower is not None and value < self.lower:
            return False
        if self.upper is not None and value > self.upper:
            return False
        return True


def parse_args(args: Sequence[str]) -> RangeSpec:
    """Validate ``args`` (program name excluded) and build a :class:`RangeSpec`.

    Args:
        args: The flag tokens, e.g. ``["--from=3", "--to=9"]``.

    Returns:
        The parsed range. A bound whose flag was not given is ``None``.

    Raises:
        MissingArgumentsError: ``args`` is empty.
        InvalidArgumentsError: more than two tokens, an unknown token, a
            repeated flag or a flag value that is not an integer.
    """

    if not args:
        raise MissingArgumentsError("no range bounds given")
    if len(args) > MAX_ARGUMENTS:
        raise InvalidArgumentsError(
            f"expected at most {MAX_ARGUMENTS} arguments, got {len(args)}",
            argument=args[MAX_ARGUMENTS],
        )

    bounds: dict[str, int] = {}
    for token in args:
        if token.startswith(FROM_FLAG):
            name, literal = "from", token[len(FROM_FLAG):]
        elif token.startswith(TO_FLAG):
            name, literal = "to", token[len(TO_FLAG):]
        else:
            raise InvalidArgumentsError(f"unrecognized argument {token!r}", argument=token)

        if name in bounds:
            raise InvalidArgumentsError(f"duplicate --{name} flag", argument=token)

        value = parse_integer(literal)
        if value is None:
            raise InvalidArgumentsError(f"--{name} expects an integer", argument=token)
        bounds[name] = value

    spec = RangeSpec(lower=bounds.get("from"), upper=bounds.get("to"))
    logger.debug("Parsed range %s", spec)
    return spec
