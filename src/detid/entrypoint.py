"""entrypoint.py - single entry point for deterministic id derivation

`generate_deterministic_id` is what callers (the HTTP API, scripts,
other services) use: it takes a namespace, JSON material text and an
optional comma separated field filter, and returns the version-5 UUID of
the canonical form of the (filtered) material.

The pipeline is parse -> filter -> canonicalize -> hash. Each step is a
pure function, so the call is safe from any number of threads at once.
"""

from __future__ import annotations

import logging
from typing import Optional

from .generator import uuid5
from .keys import DeterministicId, coerce_namespace
from .logging import get_logger, log_event
from .utils.canonicalize import canonicalize, parse_document, parse_filter

logger = get_logger("entrypoint")


def generate_deterministic_id(
    namespace, material: str, filter_csv: Optional[str] = None
) -> DeterministicId:
    """Derive the deterministic identifier of a JSON document.

    Args:
        namespace: UUID text, uuid.UUID, DeterministicId, int, or None for
            the all-zero namespace
        material: JSON text; the top level must be an object
        filter_csv: optional comma separated names of the fields to keep

    Returns:
        The version-5 DeterministicId.

    Raises:
        ParseError: material is not a JSON object
        MissingFieldError: a filter field is absent from the material
        NamespaceError: namespace cannot be read as a 128-bit value
    """
    ns = coerce_namespace(namespace)
    fields = parse_filter(filter_csv)
    document = parse_document(material)
    id_ = uuid5(ns, canonicalize(document, fields))
    if logger.isEnabledFor(logging.DEBUG):
        log_event(
            logger,
            "id_generated",
            {
                "namespace": str(ns) if ns is not None else None,
                "fields": fields,
                "id": str(id_),
            },
            level=logging.DEBUG,
        )
    return id_


__all__ = ["generate_deterministic_id"]
