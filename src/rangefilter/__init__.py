"""rangefilter package initialization."""

from .cli import main
from .core import Classification, classify, filter_stream, read_integers
from .errors import InvalidArgumentsError, MissingArgumentsError, RangeFilterError
from .validator import RangeSpec, parse_args, parse_integer

__all__ = [
    "main",
    "Classification",
    "classify",
    "filter_stream",
    "read_integers",
    "InvalidArgumentsError",
    "MissingArgumentsError",
    "RangeFilterError",
    "RangeSpec",
    "parse_args",
    "parse_integer",
    "__version__",
]
__version__ = "0.1.0"
