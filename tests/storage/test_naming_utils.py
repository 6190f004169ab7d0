import re

import pytest

from infrastructure.external.storage.models import RecordType
from infrastructure.external.storage.utils import (
    class_segment,
    extract_extension,
    generate_uid,
    underscore,
)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("OpenStruct", "open_struct"),
        ("User", "user"),
        ("HTTPRequest", "http_request"),
        ("Version2Upload", "version2_upload"),
        ("already_snake", "already_snake"),
    ],
)
def test_underscore(name, expected):
    assert underscore(name) == expected


def test_class_segment_variants():
    rt = RecordType(namespace=("NameSpaced",), name="OpenStruct")
    assert class_segment(rt) == "openstruct"
    assert class_segment(rt, "_") == "namespaced_openstruct"
    assert class_segment(rt, underscore_words=True) == "open_struct"
    assert class_segment(rt, "-", underscore_words=True) == "name_spaced-open_struct"


def test_class_segment_without_namespace_ignores_separator():
    assert class_segment(RecordType(name="Photo"), "_") == "photo"


@pytest.mark.parametrize(
    "filename, expected",
    [
        ("foo.jpg", "jpg"),
        ("archive.tar.GZ", "GZ"),
        ("dir.d/noext", None),
        (".env", None),
        ("trailing.", None),
        ("", None),
        (None, None),
    ],
)
def test_extract_extension(filename, expected):
    assert extract_extension(filename) == expected


def test_generate_uid():
    uid = generate_uid()
    assert re.fullmatch(r"[0-9a-f]{32}", uid)
    assert generate_uid() != uid
    assert len(generate_uid(32)) == 64

