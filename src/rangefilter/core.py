"""Core range filtering."""

from __future__ import annotations

import enum
import logging
from typing import Iterator, TextIO

from .validator import RangeSpec, parse_integer

logger = logging.getLogger(__name__)


class Classification(enum.Enum):
    IN_RANGE = "in-range"
    OUT_OF_RANGE = "out-of-range"


def read_integers(source: TextIO) -> Iterator[int]:
    """Yield whitespace-separated integers from ``source`` in arrival order.

    Reading stops quietly at end of input or at the first token that is not
    an integer literal.
    """

    for line in source:
        for token in line.split():
            value = parse_integer(token)
            if value is None:
                logger.debug("Stopping at non-integer token %r", token)
                return
            yield value


def classify(value: int, spec: RangeSpec) -> Classification:
    """Return whether ``value`` falls inside ``spec`` (both ends inclusive)."""

    if spec.contains(value):
        return Classification.IN_RANGE
    return Classification.OUT_OF_RANGE


def filter_stream(
    spec: RangeSpec,
    source: TextIO,
    out: TextIO,
    err: TextIO,
    separator: str = "",
) -> int:
    """Route every integer from ``source`` to ``out`` or ``err``.

    In-range values are written to ``out`` and the rest to ``err``, each
    followed by ``separator``.

    Returns:
        The number of integers read.
    """

    count = 0
    for value in read_integers(source):
        count += 1
        stream = out if classify(value, spec) is Classification.IN_RANGE else err
        stream.write(f"{value}{separator}")

    logger.debug("Classified %d integers against %s", count, spec)
    return count
