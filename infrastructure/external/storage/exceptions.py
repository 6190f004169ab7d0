"""Storage location exceptions."""
from typing import Optional


class StorageError(Exception):
    """Base storage exception."""
    pass


class ConfigurationError(StorageError):
    """Location builder configuration error."""
    pass


class IdentifierResolutionError(StorageError):
    """Record does not provide the identifier the builder was configured with."""

    def __init__(
        self,
        record_type: str,
        identifier: str,
        message: Optional[str] = None
    ):
        self.record_type = record_type
        self.identifier = identifier
        super().__init__(
            message or f"{record_type} does not provide identifier {identifier!r}"
        )
