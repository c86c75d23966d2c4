"""Error taxonomy for version number parsing and bumping.

Key Responsibilities:
    - Describe every failure kind as a small immutable variant carrying the
      payload needed for diagnostics
    - Provide :class:`NumberError`, the single exception type raised by the
      codec, which wraps exactly one variant
    - Supply RFC 7807 problem details for services that report errors over HTTP

Collaborators:
    - Upstream: ``parsing`` and ``number`` raise ``NumberError`` instances
    - Downstream: adapters re-raise them through their host format's error
      convention while keeping the variant inspectable

Side Effects:
    - None; helpers are pure data containers

Thread Safety:
    - Thread-safe; variants are frozen dataclasses
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, ClassVar, Mapping, Union

__all__ = [
    "Empty",
    "ErrorKind",
    "InvalidCharacter",
    "MajorTooBig",
    "MinorTooBig",
    "NumberError",
    "PatchTooBig",
    "ProblemDetail",
    "Variant",
]

# ==============================================================================
# TYPE DEFINITIONS
# ==============================================================================


class ErrorKind(str, Enum):
    """Kinds of failure produced by the codec."""

    EMPTY = "empty"
    INVALID_CHARACTER = "invalid_character"
    MAJOR_TOO_BIG = "major_too_big"
    MINOR_TOO_BIG = "minor_too_big"
    PATCH_TOO_BIG = "patch_too_big"


@dataclass(slots=True)
class ProblemDetail:
    """Lightweight problem details object compliant with RFC 7807."""

    title: str
    status: int
    detail: str | None = None
    type: str = "about:blank"
    instance: str | None = None
    extra: Mapping[str, Any] = field(default_factory=dict)

    def model_dump(self) -> dict[str, Any]:
        """Return a dictionary representation with optional fields dropped."""
        payload = {key: value for key, value in asdict(self).items() if value is not None}
        if not payload.get("extra"):
            payload.pop("extra", None)
        return payload


# ==============================================================================
# VARIANTS
# ==============================================================================


@dataclass(frozen=True, slots=True)
class Empty:
    """The representation doesn't contain enough information to be parsed."""

    kind: ClassVar[ErrorKind] = ErrorKind.EMPTY

    def __str__(self) -> str:
        return "number representation is empty"


@dataclass(frozen=True, slots=True)
class InvalidCharacter:
    """The representation contains a character that is neither a digit nor ``.``."""

    text: str
    character: str

    kind: ClassVar[ErrorKind] = ErrorKind.INVALID_CHARACTER

    def __str__(self) -> str:
        return f"invalid character '{self.character}' in: \"{self.text}\""


@dataclass(frozen=True, slots=True)
class MajorTooBig:
    """The major component is out of bounds.

    ``value`` is the original input text when raised by the parser and the
    boundary (``"65536"``) when raised by a bump.
    """

    value: str

    kind: ClassVar[ErrorKind] = ErrorKind.MAJOR_TOO_BIG

    def __str__(self) -> str:
        return f'major component is too big: "{self.value}"'


@dataclass(frozen=True, slots=True)
class MinorTooBig:
    """The minor component is out of bounds."""

    value: str

    kind: ClassVar[ErrorKind] = ErrorKind.MINOR_TOO_BIG

    def __str__(self) -> str:
        return f'minor component is too big: "{self.value}"'


@dataclass(frozen=True, slots=True)
class PatchTooBig:
    """The patch component is out of bounds."""

    value: str

    kind: ClassVar[ErrorKind] = ErrorKind.PATCH_TOO_BIG

    def __str__(self) -> str:
        return f'patch component is too big: "{self.value}"'


Variant = Union[Empty, InvalidCharacter, MajorTooBig, MinorTooBig, PatchTooBig]


# ==============================================================================
# EXCEPTIONS
# ==============================================================================


class NumberError(ValueError):
    """Exception wrapping every failure produced by this package.

    The wrapped variant is available through :meth:`unwrap` so callers can
    branch on the kind of failure without inspecting message text.
    """

    prefix = "semver32: "

    def __init__(self, variant: Variant) -> None:
        super().__init__(self.prefix + str(variant))
        self.variant = variant

    @property
    def kind(self) -> ErrorKind:
        return self.variant.kind

    def unwrap(self) -> Variant:
        """Return the variant this error wraps."""
        return self.variant

    @property
    def problem(self) -> ProblemDetail:
        """Problem details describing this failure for HTTP responses."""
        extra: dict[str, Any] = {"kind": self.kind.value}
        extra.update(asdict(self.variant))
        return ProblemDetail(
            title="Invalid version number",
            status=422,
            detail=str(self),
            extra=extra,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NumberError):
            return NotImplemented
        return self.variant == other.variant

    def __hash__(self) -> int:
        return hash(self.variant)

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self.variant,))
