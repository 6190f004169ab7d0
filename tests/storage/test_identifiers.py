from types import SimpleNamespace

import pytest

from infrastructure.external.storage.exceptions import IdentifierResolutionError, StorageError
from infrastructure.external.storage.identifiers import AttributeIdentifier
from infrastructure.external.storage.models import RecordType, UploadContext


class Outer:
    class Inner:
        pass


def test_attribute_identifier_reads_attribute():
    assert AttributeIdentifier()(SimpleNamespace(id=42)) == 42
    assert AttributeIdentifier("slug")(SimpleNamespace(slug="hello")) == "hello"


def test_attribute_identifier_reads_mapping_key():
    assert AttributeIdentifier("uuid")({"uuid": "xyz"}) == "xyz"


def test_missing_attribute_raises_chained_error():
    with pytest.raises(IdentifierResolutionError) as exc_info:
        AttributeIdentifier("uuid")(SimpleNamespace(id=1))
    err = exc_info.value
    assert isinstance(err, StorageError)
    assert isinstance(err.__cause__, AttributeError)
    assert err.record_type == "SimpleNamespace"
    assert "uuid" in str(err)


def test_missing_mapping_key_raises():
    with pytest.raises(IdentifierResolutionError) as exc_info:
        AttributeIdentifier()({"uuid": "xyz"})
    assert isinstance(exc_info.value.__cause__, KeyError)


def test_record_type_of_nested_class():
    rt = RecordType.of(Outer.Inner())
    assert rt.namespace == ("Outer",)
    assert rt.name == "Inner"
    assert rt.segments == ["Outer", "Inner"]


def test_record_type_of_local_class_skips_locals_marker():
    class Local:
        pass

    rt = RecordType.of(Local())
    assert rt.name == "Local"
    assert "<locals>" not in rt.namespace


def test_upload_context_resolves_record_type_once():
    ctx = UploadContext(record=Outer.Inner(), name="avatar")
    assert ctx.record_type == RecordType(namespace=("Outer",), name="Inner")
    assert ctx.has_record
    assert not UploadContext().has_record
    assert UploadContext().record_type is None


def test_upload_context_filename_falls_back_to_metadata():
    assert UploadContext(metadata={"filename": "a.png"}).original_filename == "a.png"
    assert UploadContext(filename="b.jpg", metadata={"filename": "a.png"}).original_filename == "b.jpg"
    assert UploadContext().original_filename is None
