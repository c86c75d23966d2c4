"""YAML marshaling of version numbers using PyYAML.

Key Responsibilities:
    - Represent numbers as string scalars holding the shortest form
    - Construct numbers from the raw text of scalar nodes so values such as
      ``1.10`` are never coerced through floats
    - Report parse failures as ``ConstructorError`` subclasses that keep the
      underlying :class:`~semver32.errors.NumberError`

Collaborators:
    - Upstream: configuration loaders and release tooling reading YAML
    - Downstream: ``yaml`` (PyYAML) and the codec parser

Side Effects:
    - Logs unmarshal failures at debug level
"""

from __future__ import annotations

from typing import Any

import yaml
from yaml.constructor import ConstructorError
from yaml.error import Mark

from semver32.errors import Empty, ErrorKind, NumberError
from semver32.formatting import format_short
from semver32.number import Number, parse

from .base import resolve_strict, unmarshal

__all__ = [
    "NUMBER_TAG",
    "NumberSafeDumper",
    "NumberSafeLoader",
    "NumberYAMLError",
    "construct_number",
    "dump_yaml",
    "load_yaml",
    "marshal_yaml",
    "represent_number",
    "unmarshal_yaml",
]

NUMBER_TAG = "!semver32"

# ==============================================================================
# ERRORS
# ==============================================================================


class NumberYAMLError(ConstructorError):
    """A YAML scalar could not be parsed as a version number."""

    def __init__(self, error: NumberError, mark: Mark | None = None) -> None:
        super().__init__(None, None, str(error), mark)
        self.error = error

    @property
    def kind(self) -> ErrorKind:
        return self.error.kind


# ==============================================================================
# REPRESENTERS AND CONSTRUCTORS
# ==============================================================================


def represent_number(dumper: yaml.SafeDumper, number: Number) -> yaml.ScalarNode:
    """Represent ``number`` as a plain string scalar."""
    return dumper.represent_str(format_short(number))


def _parse_node(text: str, mark: Mark | None, strict: bool | None) -> Number:
    try:
        return unmarshal("yaml", text, lambda: parse(text, strict=resolve_strict(strict)))
    except NumberError as exc:
        raise NumberYAMLError(exc, mark) from exc


def construct_number(loader: yaml.SafeLoader, node: yaml.Node) -> Number:
    """Construct a :class:`Number` from a scalar node's raw text."""
    text = loader.construct_scalar(node)
    return _parse_node(str(text), node.start_mark, None)


class NumberSafeDumper(yaml.SafeDumper):
    """Safe dumper that knows how to represent :class:`Number`."""

    def ignore_aliases(self, data: Any) -> bool:
        return isinstance(data, Number) or super().ignore_aliases(data)


class NumberSafeLoader(yaml.SafeLoader):
    """Safe loader constructing :class:`Number` from ``!semver32`` scalars."""


NumberSafeDumper.add_representer(Number, represent_number)
NumberSafeLoader.add_constructor(NUMBER_TAG, construct_number)


# ==============================================================================
# MARSHALING
# ==============================================================================


def marshal_yaml(number: Number) -> str:
    """Return the value a YAML document should hold for ``number``."""
    return format_short(number)


def unmarshal_yaml(document: str | bytes, *, strict: bool | None = None) -> Number:
    """Parse a YAML document whose root is a scalar holding a version number.

    Raises:
        NumberYAMLError: If the scalar text is not a valid version number or
            the document is empty.
        ConstructorError: If the root node is not a scalar.
    """
    node = yaml.compose(document, Loader=yaml.SafeLoader)
    if node is None:
        raise NumberYAMLError(NumberError(Empty()))
    if not isinstance(node, yaml.ScalarNode):
        raise ConstructorError(
            None, None, f"expected a scalar node, but found {node.id}", node.start_mark
        )
    return _parse_node(node.value, node.start_mark, strict)


def dump_yaml(data: Any, **kwargs: Any) -> str:
    """Dump ``data`` with Numbers rendered as shortest-form strings."""
    return yaml.dump(data, Dumper=NumberSafeDumper, **kwargs)


def load_yaml(stream: Any) -> Any:
    """Load ``stream`` resolving ``!semver32`` tagged scalars to Numbers."""
    return yaml.load(stream, Loader=NumberSafeLoader)
