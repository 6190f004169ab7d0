"""Storage location naming helpers."""
import os
import re
import secrets
from typing import Optional

from .models import RecordType

# Boundaries inside CamelCase names: "OpenStruct" -> Open|Struct,
# "HTTPRequest" -> HTTP|Request, "Version2Upload" -> Version2|Upload
_WORD_BOUNDARY_RE = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


def underscore(name: str) -> str:
    """Split a CamelCase type name into lower-case words joined by ``_``.

    Example:
        underscore("OpenStruct") -> "open_struct"
    """
    return _WORD_BOUNDARY_RE.sub("_", name).lower()


def class_segment(
    record_type: RecordType,
    separator: Optional[str] = None,
    underscore_words: bool = False
) -> str:
    """Build the directory segment naming a record's type.

    Args:
        record_type: Namespace path and inner name of the record type
        separator: Joins namespace parts and the inner name; when None only
            the inner name is used
        underscore_words: Split multi-word names at case boundaries

    Returns:
        Lower-cased class segment

    Example:
        class_segment(RecordType(namespace=("NameSpaced",), name="OpenStruct"), "_")
        -> "namespaced_openstruct"
    """
    transform = underscore if underscore_words else str.lower
    parts = [transform(part) for part in record_type.segments]

    if separator is None:
        return parts[-1]
    return separator.join(parts)


def extract_extension(filename: Optional[str]) -> Optional[str]:
    """Return the text after the final dot of the basename, case preserved.

    Dotfiles (".env") and names ending in a dot have no extension.
    """
    if not filename:
        return None
    _, ext = os.path.splitext(os.path.basename(filename))
    return ext[1:] or None


def generate_uid(nbytes: int = 16) -> str:
    """Generate a random lower-case hex token with ``nbytes`` of entropy."""
    return secrets.token_hex(nbytes)

