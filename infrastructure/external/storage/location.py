"""Pretty storage locations derived from the record an upload belongs to.

A location looks like ``<class>/<identifier>/<name>/[<version>-]<token>[.<ext>]``,
for example ``user/123/avatar/thumb-9f86d081884c7d659a2feaa0c55ad015.jpg``.
Uploads without a record get only the filename part.
"""
from typing import Callable, Optional

from core.logging_config import get_logger
from .config import LocationConfig
from .exceptions import ConfigurationError, IdentifierResolutionError
from .identifiers import AttributeIdentifier, IdentifierProvider
from .models import GeneratedKey, UploadContext
from .utils import class_segment, extract_extension, generate_uid

logger = get_logger(__name__)


class LocationBuilder:
    """Generate storage keys for uploads.

    The builder holds only immutable configuration, so one instance can be
    shared across threads and tasks.
    """

    def __init__(
        self,
        config: Optional[LocationConfig] = None,
        identifier_provider: Optional[IdentifierProvider] = None,
        uid_generator: Optional[Callable[[], str]] = None
    ):
        """Initialize location builder.

        Args:
            config: Location options, defaults to ``LocationConfig()``
            identifier_provider: Resolves record identifiers, defaults to
                reading the ``config.identifier`` attribute
            uid_generator: Source of unique tokens, defaults to a random
                hex token of ``config.token_bytes`` bytes

        Raises:
            ConfigurationError: If a provider or generator is not callable
        """
        if identifier_provider is not None and not callable(identifier_provider):
            raise ConfigurationError(
                f"identifier_provider must be callable, got {identifier_provider!r}"
            )
        if uid_generator is not None and not callable(uid_generator):
            raise ConfigurationError(
                f"uid_generator must be callable, got {uid_generator!r}"
            )

        self.config = config or LocationConfig()
        self.identifier_provider = (
            identifier_provider or AttributeIdentifier(self.config.identifier)
        )
        self.uid_generator = uid_generator or self._random_uid

    def _random_uid(self) -> str:
        return generate_uid(self.config.token_bytes)

    def directories(
        self,
        context: UploadContext,
        identifier_provider: Optional[IdentifierProvider] = None
    ) -> list[str]:
        """Directory segments for the upload; empty without a record.

        Raises:
            IdentifierResolutionError: If the record has no usable identifier
        """
        if not context.has_record:
            return []

        provider = identifier_provider or self.identifier_provider
        segment = class_segment(
            context.record_type,
            separator=self.config.namespace,
            underscore_words=self.config.class_underscore,
        )

        identifier = provider(context.record)
        if identifier is None or str(identifier) == "":
            raise IdentifierResolutionError(
                context.record_type.name,
                getattr(provider, "attribute", repr(provider)),
                f"{context.record_type.name} has an empty identifier",
            )
        identifier = str(identifier)
        if "/" in identifier:
            raise IdentifierResolutionError(
                context.record_type.name,
                getattr(provider, "attribute", repr(provider)),
                f"{context.record_type.name} identifier {identifier!r} contains '/'",
            )

        parts = [segment, identifier]
        if context.name:
            parts.append(context.name)
        return parts

    def filename(self, context: UploadContext) -> str:
        """Unique filename, prefixed with the version and keeping the extension."""
        name = self.uid_generator()
        if context.version:
            name = f"{context.version}-{name}"

        ext = extract_extension(context.original_filename)
        if ext:
            name = f"{name}.{ext}"
        return name

    def build(
        self,
        context: UploadContext,
        identifier_provider: Optional[IdentifierProvider] = None
    ) -> GeneratedKey:
        """Build the location for an upload.

        Args:
            context: Upload context
            identifier_provider: Overrides the builder's provider for this call

        Returns:
            Generated key

        Raises:
            IdentifierResolutionError: If the record has no usable identifier
        """
        directories = self.directories(context, identifier_provider)
        result = GeneratedKey(
            directories=tuple(directories),
            filename=self.filename(context),
        )

        logger.debug(
            "Storage location generated",
            key=result.key,
            record_type=context.record_type.name if context.record_type else None,
            name=context.name,
            version=context.version,
        )
        return result

    def generate(
        self,
        context: UploadContext,
        identifier_provider: Optional[IdentifierProvider] = None
    ) -> str:
        """Build the location and return it as a key string."""
        generated = self.build(context, identifier_provider)
        return generated.key

    __call__ = generate
