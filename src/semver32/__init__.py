"""Version numbers packed into 32 bits.

These numbers are NOT compliant with semver.org: they hold no prerelease or
build information, and the maximum values for the major, minor and patch
components are 65,535, 255 and 255 respectively.

Key Responsibilities:
    - Export the :class:`Number` value type, the parser and both formatters
    - Export the error taxonomy and the sortable :class:`Numbers` sequence

Collaborators:
    - Upstream: configuration loaders, artifact registries and build tools
    - Downstream: :mod:`semver32.adapters` for text, JSON, YAML and pydantic

Thread Safety:
    - Thread-safe: all operations are pure and values are immutable

Example:
    >>> from semver32 import parse
    >>> n = parse("1.2")
    >>> int(n), str(n), n.full()
    (66048, '1.2', '1.2.0')
"""

from .errors import (
    Empty,
    ErrorKind,
    InvalidCharacter,
    MajorTooBig,
    MinorTooBig,
    NumberError,
    PatchTooBig,
    ProblemDetail,
)
from .formatting import format_full, format_short
from .number import Number, parse
from .ordering import Numbers, sort_key
from .parsing import parse_packed


__all__ = [
    "Empty",
    "ErrorKind",
    "InvalidCharacter",
    "MajorTooBig",
    "MinorTooBig",
    "Number",
    "NumberError",
    "Numbers",
    "PatchTooBig",
    "ProblemDetail",
    "format_full",
    "format_short",
    "parse",
    "parse_packed",
    "sort_key",
]
