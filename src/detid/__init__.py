"""detid package initializer

Deterministic RFC 4122 version-5 identifiers for JSON documents.
"""

from .entrypoint import generate_deterministic_id
from .exceptions import MissingFieldError, ParseError
from .generator import uuid5, uuid5_from_text
from .keys import DeterministicId
from .utils.canonicalize import canonicalize

__all__ = [
    "DeterministicId",
    "MissingFieldError",
    "ParseError",
    "canonicalize",
    "generate_deterministic_id",
    "uuid5",
    "uuid5_from_text",
]
