"""
Text-to-value conversion for name-based parameter updates.

Each configuration field declares its type through its annotation; the text is
converted with a pydantic TypeAdapter built from that annotation (lax mode, so
"14" becomes 14 and "close" becomes Source.CLOSE). Delimited sequences are split
on "," first, and types providing a `from_text` classmethod parse themselves.
"""

from __future__ import annotations

from dataclasses import fields, is_dataclass
from enum import Enum
from functools import lru_cache
from typing import Any, get_origin, get_type_hints

from pydantic import TypeAdapter, ValidationError

from tacore.errors.errors import ParseFailureError

SEQUENCE_DELIMITER = ","


@lru_cache(maxsize=None)
def param_types(cls: type) -> dict[str, Any]:
    """
    Ordered mapping of settable parameter name -> resolved annotation.

    Only dataclass fields count; ClassVars such as NAME are not parameters.
    """
    if not is_dataclass(cls):
        raise TypeError(f"{cls.__name__} must be a dataclass to expose parameters")
    hints = get_type_hints(cls)
    return {f.name: hints[f.name] for f in fields(cls) if f.init}


@lru_cache(maxsize=None)
def _adapter(annotation: Any) -> TypeAdapter:
    return TypeAdapter(annotation)


def type_label(annotation: Any) -> str:
    origin = get_origin(annotation)
    if origin is not None:
        return str(annotation).replace("typing.", "")
    return getattr(annotation, "__name__", repr(annotation))


def as_text(value: Any) -> str:
    """
    Textual form of a parameter value, as accepted by parse_param().

    Sequences are joined with the delimiter, enums give their value and
    booleans are lowercase (the TOML spelling). Text passes through unchanged.
    """
    if isinstance(value, Enum):
        return as_text(value.value)
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return SEQUENCE_DELIMITER.join(as_text(v) for v in value)
    return str(value)


def split_sequence(text: str) -> list[str]:
    if not text.strip():
        return []
    return [part.strip() for part in text.split(SEQUENCE_DELIMITER)]


def parse_param(indicator: str, name: str, text: str, annotation: Any) -> Any:
    """
    Convert `text` into a value of `annotation`.

    Raises:
        ParseFailureError: if the text does not convert. The underlying pydantic
            ValidationError (or ValueError) is chained as __cause__.
    """
    from_text = getattr(annotation, "from_text", None)
    try:
        if callable(from_text):
            return from_text(text)
        if get_origin(annotation) in (tuple, list):
            return _adapter(annotation).validate_python(split_sequence(text))
        return _adapter(annotation).validate_python(text.strip())
    except (ValidationError, ValueError, TypeError) as e:
        raise ParseFailureError(
            f"Cannot parse {text!r} for parameter '{name}'",
            parameter=name,
            value=text,
            expected=type_label(annotation),
            indicator=indicator,
        ) from e
