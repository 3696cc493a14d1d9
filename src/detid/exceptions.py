"""Errors raised while deriving deterministic identifiers."""


class DeterministicIdError(ValueError):
    """Base error for all identifier derivation failures."""


class ParseError(DeterministicIdError):
    """Raised when the material is not valid JSON or not a JSON object."""


class MissingFieldError(DeterministicIdError):
    """Raised when a filter names a field that the document does not have."""

    def __init__(self, field: str):
        super().__init__(f"field {field!r} not found in material")
        self.field = field


class NamespaceError(DeterministicIdError):
    """Raised when a namespace cannot be read as a 128-bit value."""


class EncodingError(DeterministicIdError):
    """Raised when a value has no canonical JSON representation."""
