"""Tests for version-5 UUID generation and the byte order helpers."""

import uuid

import pytest

from detid.generator import (
    make_uuid,
    read_u64_big_endian,
    uuid5,
    uuid5_from_text,
    write_u64_big_endian,
)
from detid.keys import NIL, DeterministicId


def test_big_endian_helpers():
    assert write_u64_big_endian(0x0102030405060708) == bytes(range(1, 9))
    assert write_u64_big_endian(-1) == b"\xff" * 8
    buf = b"\x00\x00" + bytes(range(1, 9))
    assert read_u64_big_endian(buf, 2) == 0x0102030405060708
    assert read_u64_big_endian(write_u64_big_endian(42)) == 42


def test_make_uuid_patches_version_and_variant():
    assert str(make_uuid(bytes(16))) == "00000000-0000-5000-8000-000000000000"
    assert str(make_uuid(b"\xff" * 20)) == "ffffffff-ffff-5fff-bfff-ffffffffffff"


def test_make_uuid_rejects_short_digest():
    with pytest.raises(ValueError):
        make_uuid(bytes(15))


def test_known_vector_from_rfc_namespace():
    expected = "886313e1-3b8a-5372-9b90-0c9aee199e5d"
    assert str(uuid5(uuid.NAMESPACE_DNS, b"python.org")) == expected
    assert str(uuid5_from_text(uuid.NAMESPACE_DNS, "python.org")) == expected


@pytest.mark.parametrize(
    "namespace", [uuid.NAMESPACE_DNS, uuid.NAMESPACE_URL, uuid.NAMESPACE_OID, uuid.NAMESPACE_X500]
)
@pytest.mark.parametrize("name", ["", "a", "grüße", "{\"k\":\"v\"}", "x" * 1000])
def test_matches_standard_library(namespace, name):
    assert uuid5_from_text(namespace, name).to_uuid() == uuid.uuid5(namespace, name)


def test_absent_namespace_is_all_zero():
    name = b'{"k":"v"}'
    assert uuid5(None, name) == uuid5(NIL, name)
    assert uuid5(None, name) == uuid5("00000000-0000-0000-0000-000000000000", name)


def test_pinned_regression_vector():
    assert str(uuid5(None, b'{"k":"v"}')) == "25ae0481-e3b7-59b8-b953-11b9ff0a8e13"


def test_namespace_and_name_sensitivity():
    assert uuid5(uuid.NAMESPACE_DNS, b"x") != uuid5(uuid.NAMESPACE_URL, b"x")
    assert uuid5(uuid.NAMESPACE_DNS, b"x") != uuid5(uuid.NAMESPACE_DNS, b"y")
    assert uuid5(None, b"x") != uuid5(uuid.NAMESPACE_DNS, b"x")


def test_every_result_has_version_5_and_rfc_variant():
    for i in range(256):
        d = uuid5(uuid.NAMESPACE_OID, str(i).encode())
        assert isinstance(d, DeterministicId)
        assert (d.msb >> 12) & 0xF == 0b0101
        assert d.lsb >> 62 == 0b10
        assert d.version == 5 and d.variant == 2


def test_bytes_like_names_are_accepted():
    ref = uuid5(None, b"abc")
    assert uuid5(None, bytearray(b"abc")) == ref
    assert uuid5(None, memoryview(b"abc")) == ref


def test_null_or_text_name_rejected():
    with pytest.raises(TypeError):
        uuid5(None, None)
    with pytest.raises(TypeError):
        uuid5(None, "text")
    with pytest.raises(TypeError):
        uuid5(None, 5)
    with pytest.raises(TypeError):
        uuid5(None, [1, 2, 3])
    with pytest.raises(TypeError):
        uuid5_from_text(None, None)
