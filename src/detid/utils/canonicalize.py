"""canonicalize.py - JSON Canonicalization Scheme (RFC 8785) encoder

Turns a JSON document into the exact byte sequence that is hashed into a
deterministic identifier. Serialization is delegated to `jcs`; this module
parses material strictly, applies the field filter, and rejects values that
have no canonical form before they reach the encoder.
"""

from __future__ import annotations

import json
import math
from collections.abc import Mapping
from typing import Any, Iterable, List, Optional

import jcs

from ..exceptions import EncodingError, MissingFieldError, ParseError


def _reject_constant(name: str):
    raise ParseError(f"{name} is not a valid JSON number")


def _parse_float(literal: str) -> float:
    value = float(literal)
    if math.isinf(value):
        raise ParseError(f"number {literal} overflows double precision")
    return value


def _object_pairs(pairs: list) -> dict:
    obj = {}
    for key, value in pairs:
        if key in obj:
            raise ParseError(f"duplicate key {key!r}")
        obj[key] = value
    return obj


def parse_document(text: str) -> dict:
    """Parse JSON text that must hold an object at the top level."""
    if not isinstance(text, (str, bytes, bytearray)):
        raise ParseError(f"material must be JSON text, got {type(text).__name__}")
    try:
        doc = json.loads(
            text,
            object_pairs_hook=_object_pairs,
            parse_float=_parse_float,
            parse_constant=_reject_constant,
        )
    except ParseError:
        raise
    except ValueError as e:
        raise ParseError(f"material is not valid JSON: {e}") from e
    if not isinstance(doc, dict):
        raise ParseError(
            f"material must be a JSON object, got {type(doc).__name__}"
        )
    return doc


def parse_filter(csv: Optional[str]) -> Optional[List[str]]:
    """Split a comma separated field list; blank input means no filter."""
    if csv is None or not csv.strip():
        return None
    fields: List[str] = []
    for part in csv.split(","):
        name = part.strip()
        if name and name not in fields:
            fields.append(name)
    return fields or None


def select_fields(document: Mapping, fields: Iterable[str]) -> dict:
    """Reduce a document to the given fields, failing on the first missing one."""
    selected = {}
    for name in fields:
        if name not in document:
            raise MissingFieldError(name)
        selected[name] = document[name]
    return selected


def _check_text(text: str) -> str:
    try:
        text.encode("utf-8")
    except UnicodeEncodeError as e:
        raise EncodingError(f"string is not valid Unicode: {e}") from e
    return text


def _normalize(value: Any) -> Any:
    """Plain dict/list copy of `value`, rejecting what JCS cannot encode."""
    if value is None or isinstance(value, bool):
        return value
    if isinstance(value, str):
        return _check_text(value)
    if isinstance(value, int):
        try:
            float(value)
        except OverflowError as e:
            raise EncodingError(f"integer {value} overflows double precision") from e
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            raise EncodingError(f"{value!r} has no JSON representation")
        return value
    if isinstance(value, Mapping):
        out = {}
        for key, item in value.items():
            if not isinstance(key, str):
                raise EncodingError(
                    f"object keys must be strings, got {type(key).__name__}"
                )
            out[_check_text(key)] = _normalize(item)
        return out
    if isinstance(value, (list, tuple)):
        return [_normalize(item) for item in value]
    raise EncodingError(f"{type(value).__name__} is not a JSON type")


def _encode(obj: Any) -> bytes:
    return jcs.canonicalize(_normalize(obj))


def canonicalize_json(obj: Any) -> str:
    """Return the JCS text of any JSON value."""
    return _encode(obj).decode("utf-8")


def canonicalize(document: Mapping, fields: Optional[Iterable[str]] = None) -> bytes:
    """Canonical UTF-8 bytes of `document`, reduced to `fields` when given.

    An empty or absent `fields` keeps the whole document. Every listed field
    must exist in the document, otherwise MissingFieldError is raised.
    """
    if not isinstance(document, Mapping):
        raise ParseError(
            f"material must be a JSON object, got {type(document).__name__}"
        )
    if isinstance(fields, str):
        raise TypeError("fields must be a collection of names, not a string")
    if fields:
        document = select_fields(document, fields)
    return _encode(document)
