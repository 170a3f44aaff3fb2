"""
Unit tests for hash primitives.
"""

import pytest

from arbor.exceptions import UnsupportedHashAlgorithmError
from arbor.merkle.hashing import (
    DEFAULT_ALGORITHM,
    SUPPORTED_ALGORITHMS,
    double_hash,
    hash_concat,
    hash_data,
    validate_algorithm,
)


class TestHashData:
    """Test single digests."""

    def test_sha256_known_vector(self):
        """SHA-256 of b"hello" matches the published digest."""
        assert hash_data(b"hello").hex() == (
            "2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824"
        )

    def test_single_byte_vector(self):
        assert hash_data(b"\x00").hex() == (
            "6e340b9cffb37a989ca544e6bb780a2c78901d3fb33738768511a30617afa01d"
        )

    def test_default_algorithm_is_sha256(self):
        assert DEFAULT_ALGORITHM == "sha256"

    def test_sha3_256_empty_vector(self):
        assert hash_data(b"", "sha3_256").hex() == (
            "a7ffc6f8bf1ed76651c14756a061d662f580ff4de43b49fa82d80a4b80f8434a"
        )

    def test_blake2s_empty_vector(self):
        assert hash_data(b"", "blake2s").hex() == (
            "69217a3079908094e11121d042354a7c1f55b6482ca1a51e1b250dfd1ed0eef9"
        )

    @pytest.mark.parametrize("algorithm", SUPPORTED_ALGORITHMS)
    def test_digests_are_32_bytes(self, algorithm):
        assert len(hash_data(b"some data", algorithm)) == 32

    def test_deterministic(self):
        assert hash_data(b"data") == hash_data(b"data")


class TestHashConcat:
    """Test pairwise combination."""

    def test_concat_is_hash_of_joined_bytes(self):
        left = hash_data(b"left")
        right = hash_data(b"right")

        assert hash_concat(left, right) == hash_data(left + right)

    def test_concat_is_order_sensitive(self):
        left = hash_data(b"left")
        right = hash_data(b"right")

        assert hash_concat(left, right) != hash_concat(right, left)

    def test_concat_uses_algorithm(self):
        left = hash_data(b"left", "sha3_256")
        right = hash_data(b"right", "sha3_256")

        assert hash_concat(left, right, "sha3_256") == hash_data(left + right, "sha3_256")


class TestDoubleHash:
    """Test double hashing."""

    def test_double_hash_applies_twice(self):
        assert double_hash(b"data") == hash_data(hash_data(b"data"))

    def test_double_hash_differs_from_single(self):
        assert double_hash(b"data") != hash_data(b"data")


class TestValidateAlgorithm:
    """Test algorithm validation."""

    def test_supported_algorithm(self):
        assert validate_algorithm("sha256") == "sha256"

    def test_case_insensitive(self):
        assert validate_algorithm("SHA3_256") == "sha3_256"

    @pytest.mark.parametrize("algorithm", ["md5", "sha512", "", None])
    def test_unsupported_algorithm(self, algorithm):
        with pytest.raises(UnsupportedHashAlgorithmError, match="Unsupported hash algorithm"):
            validate_algorithm(algorithm)
