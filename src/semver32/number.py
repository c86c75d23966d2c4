"""Version numbers packed into 32 bits.

Key Responsibilities:
    - Provide the immutable :class:`Number` value type with component
      accessors, copy-on-write mutators and bump operations
    - Expose :func:`parse` as the text entry point returning a ``Number``

Collaborators:
    - Upstream: adapters, configuration models and release tooling
    - Downstream: ``parsing`` for text input, ``formatting`` for rendering

Side Effects:
    - None; every operation returns a new value

Thread Safety:
    - Thread-safe; instances are frozen

Example:
    >>> n = Number.new(0, 1, 0)
    >>> int(n), str(n)
    (256, '0.1')
    >>> str(n.bump_major())
    '1'
"""

from __future__ import annotations

from dataclasses import dataclass

from .errors import MajorTooBig, MinorTooBig, NumberError, PatchTooBig
from .formatting import format_full, format_short
from .layout import (
    INV_MAJOR_MASK,
    INV_MINOR_MASK,
    INV_PATCH_MASK,
    MAJOR_MASK,
    MAJOR_MAX,
    MAJOR_SHIFT,
    MINOR_MAX,
    MINOR_SHIFT,
    PATCH_MAX,
    VALUE_MAX,
    major_of,
    minor_of,
    pack,
    patch_of,
)
from .parsing import parse_packed

__all__ = ["Number", "parse"]

# ==============================================================================
# VALIDATION HELPERS
# ==============================================================================


def _check_component(name: str, value: int, maximum: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    if not 0 <= value <= maximum:
        raise ValueError(f"{name} must be between 0 and {maximum}, got {value}")
    return value


# ==============================================================================
# DATA MODELS
# ==============================================================================


@dataclass(frozen=True, slots=True, order=True)
class Number:
    """A version number capable of storing major components from 0 to 65,535,
    minor components from 0 to 255 and patch components from 0 to 255.

    No prerelease or build information is included. Instances compare by their
    packed value, which orders them by ``(major, minor, patch)``.

    Attributes:
        value: The packed 32-bit representation.
    """

    value: int = 0

    def __post_init__(self) -> None:
        _check_component("value", self.value, VALUE_MAX)

    @classmethod
    def new(cls, major: int, minor: int = 0, patch: int = 0) -> Number:
        """Create a Number out of its major, minor and patch components.

        Raises:
            ValueError: If a component does not fit its bit width.
        """
        return cls(
            pack(
                _check_component("major", major, MAJOR_MAX),
                _check_component("minor", minor, MINOR_MAX),
                _check_component("patch", patch, PATCH_MAX),
            )
        )

    @classmethod
    def parse(cls, text: str | bytes, *, strict: bool = False) -> Number:
        """Parse ``major[.minor[.patch]]`` text.

        Raises:
            NumberError: If the text is empty, has an invalid character or a
                component is too big.
        """
        return cls(parse_packed(text, strict=strict))

    # -- accessors -------------------------------------------------------------

    @property
    def major(self) -> int:
        return major_of(self.value)

    @property
    def minor(self) -> int:
        return minor_of(self.value)

    @property
    def patch(self) -> int:
        return patch_of(self.value)

    # -- mutators --------------------------------------------------------------

    def with_major(self, major: int) -> Number:
        """Return a copy with the major component replaced."""
        major = _check_component("major", major, MAJOR_MAX)
        return Number(self.value & INV_MAJOR_MASK | major << MAJOR_SHIFT)

    def with_minor(self, minor: int) -> Number:
        """Return a copy with the minor component replaced."""
        minor = _check_component("minor", minor, MINOR_MAX)
        return Number(self.value & INV_MINOR_MASK | minor << MINOR_SHIFT)

    def with_patch(self, patch: int) -> Number:
        """Return a copy with the patch component replaced."""
        patch = _check_component("patch", patch, PATCH_MAX)
        return Number(self.value & INV_PATCH_MASK | patch)

    # -- bumps -----------------------------------------------------------------

    def bump_major(self) -> Number:
        """Increase major by one and reset minor and patch to zero.

        Raises:
            NumberError: Wrapping ``MajorTooBig("65536")`` when major is 65535.
        """
        if self.major == MAJOR_MAX:
            raise NumberError(MajorTooBig(str(MAJOR_MAX + 1)))
        return Number((self.major + 1) << MAJOR_SHIFT)

    def bump_minor(self) -> Number:
        """Increase minor by one and reset patch; major is unaffected.

        Raises:
            NumberError: Wrapping ``MinorTooBig("256")`` when minor is 255.
        """
        if self.minor == MINOR_MAX:
            raise NumberError(MinorTooBig(str(MINOR_MAX + 1)))
        return Number(self.value & MAJOR_MASK | (self.minor + 1) << MINOR_SHIFT)

    def bump_patch(self) -> Number:
        """Increase patch by one; major and minor are unaffected.

        Raises:
            NumberError: Wrapping ``PatchTooBig("256")`` when patch is 255.
        """
        if self.patch == PATCH_MAX:
            raise NumberError(PatchTooBig(str(PATCH_MAX + 1)))
        return Number(self.value & INV_PATCH_MASK | self.patch + 1)

    # -- rendering -------------------------------------------------------------

    def full(self) -> str:
        """Return the ``major.minor.patch`` rendering."""
        return format_full(self.value)

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return format_short(self.value)

    def __repr__(self) -> str:
        return f"Number('{self.full()}')"

    def __format__(self, spec: str) -> str:
        if spec and spec[-1] in "dxXob":
            return format(self.value, spec)
        return format(str(self), spec)


def parse(text: str | bytes, *, strict: bool = False) -> Number:
    """Parse version text into a :class:`Number`."""
    return Number.parse(text, strict=strict)
