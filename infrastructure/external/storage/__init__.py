"""Storage location entry point."""
from functools import lru_cache

from core.config import settings
from core.logging_config import get_logger
from .config import LocationConfig
from .location import LocationBuilder
from .models import UploadContext

logger = get_logger(__name__)


@lru_cache
def get_location_config() -> LocationConfig:
    """Get location configuration from settings.

    Assembles LocationConfig from core.config.settings to maintain
    single source of truth for configuration.

    Returns:
        Location configuration instance
    """
    s = settings.location
    return LocationConfig(
        identifier=s.identifier,
        namespace=s.namespace,
        class_underscore=s.class_underscore,
        token_bytes=s.token_bytes,
    )


@lru_cache
def get_location_builder() -> LocationBuilder:
    """Get the process-wide location builder.

    Returns:
        Location builder configured from settings
    """
    config = get_location_config()
    logger.info(
        "Location builder initialized",
        identifier=config.identifier,
        namespace=config.namespace,
        class_underscore=config.class_underscore,
    )
    return LocationBuilder(config)


def generate_location(context: UploadContext) -> str:
    """Generate a storage key with the process-wide builder.

    Raises:
        IdentifierResolutionError: If the record has no usable identifier
    """
    return get_location_builder().generate(context)


# Export public interface
__all__ = [
    # Entry points
    "get_location_config",
    "get_location_builder",
    "generate_location",

    # Builder and configuration
    "LocationBuilder",
    "LocationConfig",

    # Models
    "UploadContext",
    "RecordType",
    "GeneratedKey",

    # Identifier providers
    "IdentifierProvider",
    "AttributeIdentifier",

    # Exceptions
    "StorageError",
    "ConfigurationError",
    "IdentifierResolutionError",

    # Utils
    "class_segment",
    "underscore",
    "extract_extension",
    "generate_uid",
]

# Import models and exceptions for easier access
from .models import RecordType, GeneratedKey
from .identifiers import IdentifierProvider, AttributeIdentifier
from .exceptions import (
    StorageError,
    ConfigurationError,
    IdentifierResolutionError
)
from .utils import (
    class_segment,
    underscore,
    extract_extension,
    generate_uid
)
