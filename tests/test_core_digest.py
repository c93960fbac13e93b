# -*- coding: utf-8 -*-
"""
Tests for dtk.core.digest and dtk.core.identifiers.

Created
-------
2026-10-19
"""

import re
import time
import uuid

import pytest
from ulid import ULID

from dtk.core.digest import HashAlgorithm, hash_text
from dtk.core.identifiers import (
    generate_ulid,
    generate_ulids,
    generate_uuid,
    generate_uuids,
)

CROCKFORD_ULID = re.compile(r"^[0-9A-HJKMNP-TV-Z]{26}$")


class TestHashAlgorithm:
    def test_labels(self):
        assert HashAlgorithm.MD5.label == "MD5"
        assert HashAlgorithm.SHA256.label == "SHA-256"
        assert HashAlgorithm.SHA512.label == "SHA-512"

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("md5", HashAlgorithm.MD5),
            ("SHA-256", HashAlgorithm.SHA256),
            ("sha256", HashAlgorithm.SHA256),
            (" sha_512 ", HashAlgorithm.SHA512),
        ],
    )
    def test_from_name(self, name, expected):
        assert HashAlgorithm.from_name(name) is expected

    def test_from_name_unknown(self):
        with pytest.raises(ValueError, match="Unknown hash algorithm"):
            HashAlgorithm.from_name("crc32")


class TestHashText:
    def test_default_is_sha256(self):
        assert hash_text("abc") == (
            "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
        )

    def test_md5(self):
        assert hash_text("", HashAlgorithm.MD5) == "d41d8cd98f00b204e9800998ecf8427e"
        assert hash_text("abc", HashAlgorithm.MD5) == "900150983cd24fb0d6963f7d28e17f72"

    def test_sha512(self):
        assert hash_text("abc", HashAlgorithm.SHA512) == (
            "ddaf35a193617abacc417349ae20413112e6fa4e89a97ea20a9eeee64b55d39a"
            "2192992a274fc1a836ba3c23a3feebbd454d4423643ce80e2a9ac94fa54ca49f"
        )

    def test_lowercase_hex(self):
        digest = hash_text("Hello", HashAlgorithm.SHA512)
        assert len(digest) == 128
        assert digest == digest.lower()


class TestIdentifiers:
    def test_uuid_is_version4(self):
        value = generate_uuid()
        parsed = uuid.UUID(value)
        assert parsed.version == 4
        assert str(parsed) == value

    def test_uuids_unique(self):
        values = generate_uuids(50)
        assert len(values) == 50
        assert len(set(values)) == 50

    def test_count_must_be_positive(self):
        with pytest.raises(ValueError):
            generate_uuids(0)

    def test_ulid_format(self):
        value = generate_ulid()
        assert len(value) == 26
        assert CROCKFORD_ULID.match(value)

    def test_ulids_unique(self):
        values = generate_ulids(50)
        assert len(values) == 50
        assert len(set(values)) == 50
        assert all(CROCKFORD_ULID.match(v) for v in values)

    def test_ulid_sorts_by_creation_time(self):
        first = generate_ulid()
        time.sleep(0.002)
        second = generate_ulid()
        assert first < second

    def test_ulid_timestamp_is_now(self):
        before = time.time()
        value = generate_ulid()
        after = time.time()
        stamp = ULID.from_str(value).timestamp
        assert before - 0.002 <= stamp <= after + 0.002

    def test_ulid_count_must_be_positive(self):
        with pytest.raises(ValueError):
            generate_ulids(0)
