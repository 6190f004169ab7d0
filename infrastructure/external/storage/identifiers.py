"""Identifier providers resolving the per-record path segment."""
from collections.abc import Mapping
from typing import Any, Protocol

from core.logging_config import get_logger
from .exceptions import IdentifierResolutionError
from .models import RecordType

logger = get_logger(__name__)


class IdentifierProvider(Protocol):
    """Callable returning the identifier of a record."""

    def __call__(self, record: Any) -> Any:
        ...


class AttributeIdentifier:
    """Read the identifier from a named attribute, or key for mappings."""

    def __init__(self, attribute: str = "id"):
        self.attribute = attribute

    def __call__(self, record: Any) -> Any:
        try:
            if isinstance(record, Mapping):
                return record[self.attribute]
            return getattr(record, self.attribute)
        except (AttributeError, KeyError) as e:
            record_type = RecordType.of(record).name
            logger.warning(
                "Record identifier not resolvable",
                record_type=record_type,
                identifier=self.attribute,
            )
            raise IdentifierResolutionError(record_type, self.attribute) from e

    def __repr__(self) -> str:
        return f"AttributeIdentifier({self.attribute!r})"
