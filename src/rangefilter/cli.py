"""Command-line entry point for rangefilter."""

from __future__ import annotations

import logging
import sys
from typing import Sequence, TextIO

from .config import RangeFilterConfig, get_config
from .core import filter_stream
from .errors import RangeFilterError
from .validator import parse_args

logger = logging.getLogger(__name__)

PACKAGE_LOGGER = "rangefilter"


def configure_logging(config: RangeFilterConfig) -> logging.Handler:
    """Attach a handler for ``config`` to the package logger and return it.

    Records are written to ``config.log_file`` when set, otherwise to
    standard error.
    """

    if config.log_file is not None:
        handler: logging.Handler = logging.FileHandler(config.log_file, encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(config.log_format))

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(config.log_level.upper())
    package_logger.addHandler(handler)
    return handler


def main(
    argv: Sequence[str] | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    """Validate ``argv`` and filter standard input.

    Args:
        argv: Full argument vector including the program name. Defaults to
            :data:`sys.argv`.
        stdin: Input source. Defaults to :data:`sys.stdin`.
        stdout: Destination for in-range values. Defaults to :data:`sys.stdout`.
        stderr: Destination for out-of-range values. Defaults to :data:`sys.stderr`.

    Returns:
        ``-1`` when no flags were given, ``-2`` for any other invalid argument
        list, otherwise the number of integers read.
    """

    if argv is None:
        argv = sys.argv
    config = get_config()

    try:
        spec = parse_args(list(argv[1:]))
    except RangeFilterError as exc:
        logger.debug("Rejected arguments: %s", exc)
        return exc.exit_status

    return filter_stream(
        spec,
        stdin if stdin is not None else sys.stdin,
        stdout if stdout is not None else sys.stdout,
        stderr if stderr is not None else sys.stderr,
        separator=config.separator,
    )


def run() -> None:
    """Console script entry point."""
    configure_logging(get_config())
    sys.exit(main())
