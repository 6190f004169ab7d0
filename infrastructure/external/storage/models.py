"""Storage location data transfer objects."""
from typing import Any, Optional
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator


class RecordType(BaseModel):
    """Namespace path and inner name of the type a record belongs to."""
    model_config = ConfigDict(frozen=True)

    namespace: tuple[str, ...] = ()
    name: str = Field(min_length=1)

    @classmethod
    def of(cls, record: Any) -> "RecordType":
        """Describe ``record`` by its class qualname.

        ``NameSpaced.OpenStruct`` becomes namespace ``("NameSpaced",)`` and
        name ``"OpenStruct"``. Function-local markers are skipped.
        """
        record_cls = type(record)
        qualname = getattr(record_cls, "__qualname__", record_cls.__name__)
        parts = [p for p in qualname.split(".") if p and p != "<locals>"]
        return cls(namespace=tuple(parts[:-1]), name=parts[-1])

    @property
    def segments(self) -> list[str]:
        return [*self.namespace, self.name]


class UploadContext(BaseModel):
    """What the upload pipeline knows about a file when asking for its key."""
    model_config = ConfigDict(frozen=True)

    record: Any = None
    record_type: Optional[RecordType] = None
    name: Optional[str] = None  # Attachment field name
    version: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("version", "derivative"),
    )
    filename: Optional[str] = None
    metadata: dict[str, Any] = Field(default_factory=dict)

    @field_validator("name", "version")
    @classmethod
    def _check_single_segment(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and "/" in v:
            raise ValueError("must not contain '/'")
        return v

    @model_validator(mode="before")
    @classmethod
    def _resolve_record_type(cls, data: Any) -> Any:
        if (
            isinstance(data, dict)
            and data.get("record") is not None
            and data.get("record_type") is None
        ):
            data = {**data, "record_type": RecordType.of(data["record"])}
        return data

    @property
    def has_record(self) -> bool:
        return self.record is not None

    @property
    def original_filename(self) -> Optional[str]:
        """Explicit filename, falling back to the one in upload metadata."""
        if self.filename:
            return self.filename
        value = self.metadata.get("filename")
        return str(value) if value else None


class GeneratedKey(BaseModel):
    """Directory segments plus the unique filename of a storage location."""
    model_config = ConfigDict(frozen=True)

    directories: tuple[str, ...] = ()
    filename: str

    @property
    def key(self) -> str:
        return "/".join([*self.directories, self.filename])

    def __str__(self) -> str:
        return self.key
