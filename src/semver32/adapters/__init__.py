"""Serialization adapters for text, JSON, YAML and pydantic models."""

from .json_codec import NumberJSONEncoder, marshal_json, unmarshal_json
from .pydantic_types import NumberField, validate_number
from .text_codec import marshal_text, unmarshal_text
from .yaml_codec import (
    NUMBER_TAG,
    NumberSafeDumper,
    NumberSafeLoader,
    NumberYAMLError,
    construct_number,
    dump_yaml,
    load_yaml,
    marshal_yaml,
    represent_number,
    unmarshal_yaml,
)


__all__ = [
    "NUMBER_TAG",
    "NumberField",
    "NumberJSONEncoder",
    "NumberSafeDumper",
    "NumberSafeLoader",
    "NumberYAMLError",
    "construct_number",
    "dump_yaml",
    "load_yaml",
    "marshal_json",
    "marshal_text",
    "marshal_yaml",
    "represent_number",
    "unmarshal_json",
    "unmarshal_text",
    "unmarshal_yaml",
    "validate_number",
]
