"""Tests for the HKDF helpers."""

import pytest

from passcraft import kdf
from passcraft.errors import KeyDerivationError


class TestHkdf:
    # RFC 5869, appendix A.1
    IKM = bytes.fromhex("0b" * 22)
    SALT = bytes.fromhex("000102030405060708090a0b0c")
    INFO = bytes.fromhex("f0f1f2f3f4f5f6f7f8f9")
    PRK = bytes.fromhex("077709362c2e32df0ddc3f0dc47bba6390b6c73bb50f9c3122ec844ad7c2b3e5")
    OKM = bytes.fromhex(
        "3cb25f25faacd57a90434f64d0362f2a2d2d0a90cf1a5a4c5db02d56ecc4c5bf34007208d5b887185865"
    )

    def test_extract_matches_rfc_vector(self):
        assert kdf.hkdf_extract(self.SALT, self.IKM) == self.PRK

    def test_expand_matches_rfc_vector(self):
        assert kdf.hkdf_expand(self.PRK, self.INFO, 42) == self.OKM

    def test_empty_salt_equals_zero_salt(self):
        assert kdf.hkdf_extract(b"", b"seed") == kdf.hkdf_extract(b"\x00" * 32, b"seed")

    def test_expand_default_length(self):
        assert len(kdf.hkdf_expand(self.PRK, b"info")) == 32

    def test_expand_too_long(self):
        with pytest.raises(KeyDerivationError):
            kdf.hkdf_expand(self.PRK, b"info", 255 * 32 + 1)


class TestInfoLabel:
    def test_without_service(self):
        assert kdf.build_info(0) == b"passcraft-password-\x00\x00\x00\x00"

    def test_with_service(self):
        assert kdf.build_info(1, "github") == b"passcraft-password-github-\x00\x00\x00\x01"

    def test_empty_service_still_adds_separator(self):
        assert kdf.build_info(0, "") != kdf.build_info(0)

    def test_retry_counter_is_big_endian(self):
        assert kdf.build_info(999).endswith(b"-\x00\x00\x03\xe7")
