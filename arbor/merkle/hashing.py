"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Arbor, a product of Garudex Labs

Hash primitives shared by the Merkle tree and the flat root reducer.

All functions are pure and deterministic. Digests are raw bytes; hex encoding
is left to callers that need a textual representation.
"""

import hashlib

from arbor.exceptions import UnsupportedHashAlgorithmError


DEFAULT_ALGORITHM = "sha256"

# hashlib names with a fixed 32-byte digest
SUPPORTED_ALGORITHMS = ("sha256", "sha3_256", "blake2s")


def validate_algorithm(algorithm: str) -> str:
    """
    Check that a hash algorithm name is supported.

    Args:
        algorithm: hashlib algorithm name

    Returns:
        The normalized (lower-case) algorithm name

    Raises:
        UnsupportedHashAlgorithmError: If the algorithm is not supported
    """
    normalized = algorithm.lower() if isinstance(algorithm, str) else algorithm
    if normalized not in SUPPORTED_ALGORITHMS:
        raise UnsupportedHashAlgorithmError(
            f"Unsupported hash algorithm '{algorithm}', "
            f"expected one of {list(SUPPORTED_ALGORITHMS)}"
        )
    return normalized


def hash_data(data: bytes, algorithm: str = DEFAULT_ALGORITHM) -> bytes:
    """
    Compute a single digest of raw bytes.

    Args:
        data: Bytes to hash
        algorithm: hashlib algorithm name (default: sha256)

    Returns:
        Digest bytes (32 bytes for every supported algorithm)

    Example:
        >>> hash_data(b"hello").hex()
        '2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824'
    """
    return hashlib.new(algorithm, data).digest()


def hash_concat(left: bytes, right: bytes, algorithm: str = DEFAULT_ALGORITHM) -> bytes:
    """
    Hash the concatenation of two digests.

    The bytes of ``left`` are immediately followed by the bytes of ``right``,
    with no separator.

    Args:
        left: Left digest
        right: Right digest
        algorithm: hashlib algorithm name (default: sha256)

    Returns:
        Digest of ``left + right``
    """
    return hash_data(left + right, algorithm)


def double_hash(data: bytes, algorithm: str = DEFAULT_ALGORITHM) -> bytes:
    """Hash data twice: ``H(H(data))``."""
    return hash_data(hash_data(data, algorithm), algorithm)
