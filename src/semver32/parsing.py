"""Text to packed version number parsing.

Key Responsibilities:
    - Scan ``major[.minor[.patch]]`` text left to right, accumulating each
      segment and checking its bound after every digit
    - Report failures as :class:`~semver32.errors.NumberError` carrying the
      original input

Side Effects:
    - None; parsing is a pure function of its input

Thread Safety:
    - Thread-safe; no shared state
"""

from __future__ import annotations

from .errors import Empty, InvalidCharacter, MajorTooBig, MinorTooBig, NumberError, PatchTooBig
from .layout import MAJOR_MAX, MINOR_MAX, PATCH_MAX, pack

__all__ = ["parse_packed"]

# ==============================================================================
# SEGMENT TABLE
# ==============================================================================

_SEGMENTS = (
    (MAJOR_MAX, MajorTooBig),
    (MINOR_MAX, MinorTooBig),
    (PATCH_MAX, PatchTooBig),
)


def parse_packed(text: str | bytes, *, strict: bool = False) -> int:
    """Parse ``text`` and return the packed 32-bit value.

    Args:
        text: Version text such as ``"1"``, ``"1.2"`` or ``"1.2.3"``. Bytes are
            decoded as UTF-8.
        strict: When ``False`` (the default) a fourth segment and anything
            after it are ignored. When ``True`` the ``.`` opening a fourth
            segment is rejected as an invalid character.

    Returns:
        The packed integer. Missing or empty segments count as ``0``.

    Raises:
        NumberError: If ``text`` is empty, contains a character other than an
            ASCII digit or ``.``, or a segment exceeds its bound.
    """
    if isinstance(text, (bytes, bytearray)):
        text = bytes(text).decode("utf-8", errors="replace")
    if not text:
        raise NumberError(Empty())

    values = [0, 0, 0]
    index = 0
    for character in text:
        if character == ".":
            index += 1
            if index == len(_SEGMENTS):
                if strict:
                    raise NumberError(InvalidCharacter(text, character))
                break
        elif "0" <= character <= "9":
            bound, too_big = _SEGMENTS[index]
            values[index] = values[index] * 10 + ord(character) - ord("0")
            if values[index] > bound:
                raise NumberError(too_big(text))
        else:
            raise NumberError(InvalidCharacter(text, character))

    return pack(*values)
