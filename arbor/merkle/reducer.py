"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Arbor, a product of Garudex Labs

Flat Merkle root reduction over precomputed digests.

Folds a list of digests pairwise into a single root using double hashing,
the convention used by transaction-commitment schemes. No tree is kept and
no proofs can be generated. Roots produced here are not comparable with
MerkleTree roots, which hash each level once.
"""

from typing import List, Sequence

from arbor.exceptions import EmptyTreeError
from arbor.logging_config import get_logger
from arbor.merkle.hashing import DEFAULT_ALGORITHM, double_hash, validate_algorithm

logger = get_logger(__name__)


def reduce_root(digests: Sequence[bytes], algorithm: str = DEFAULT_ALGORITHM) -> bytes:
    """
    Reduce a flat list of digests to a single root.

    Each round pairs consecutive digests and replaces every pair with
    ``H(H(left + right))``. When a round has an odd count, the last digest
    is paired with itself. A single digest is returned unchanged.

    Args:
        digests: Ordered, non-empty sequence of digests
        algorithm: hashlib algorithm name (default: sha256)

    Returns:
        Root digest

    Raises:
        EmptyTreeError: If digests is empty
        UnsupportedHashAlgorithmError: If the algorithm is not supported
    """
    if not digests:
        raise EmptyTreeError("Cannot reduce an empty list of digests")

    algorithm = validate_algorithm(algorithm)
    current: List[bytes] = list(digests)
    round_number = 0

    while len(current) > 1:
        round_number += 1
        logger.debug("merkle_reduce_round", round=round_number, digest_count=len(current))

        next_round: List[bytes] = []
        for i in range(0, len(current), 2):
            left = current[i]
            right = current[i + 1] if i + 1 < len(current) else left
            next_round.append(double_hash(left + right, algorithm))
        current = next_round

    logger.debug("merkle_reduce_complete", rounds=round_number, merkle_root=current[0].hex())
    return current[0]
