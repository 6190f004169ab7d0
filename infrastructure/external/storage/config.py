"""Location builder configuration models."""
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator


class LocationConfig(BaseModel):
    """Options applied to every location a builder generates."""
    model_config = ConfigDict(frozen=True)

    identifier: str = "id"
    namespace: Optional[str] = None  # Separator; None keeps only the inner class
    class_underscore: bool = False
    token_bytes: int = Field(default=16, ge=16)

    @field_validator("identifier")
    @classmethod
    def _check_identifier(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("identifier must be a non-empty attribute name")
        return v

    @field_validator("namespace")
    @classmethod
    def _check_namespace(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        if v == "":
            raise ValueError("namespace separator must not be empty")
        if "/" in v:
            raise ValueError("namespace separator must not contain '/'")
        return v
