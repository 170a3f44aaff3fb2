"""
Merkle tree implementation with inclusion proofs.

This module provides Merkle tree construction, proof generation and
verification, and a flat double-hash root reducer.
"""

from arbor.merkle.hashing import (
    DEFAULT_ALGORITHM,
    SUPPORTED_ALGORITHMS,
    double_hash,
    hash_concat,
    hash_data,
)
from arbor.merkle.reducer import reduce_root
from arbor.merkle.tree import (
    HashDirection,
    MerkleNode,
    MerkleProof,
    MerkleTree,
    ProofStep,
)

__all__ = [
    "DEFAULT_ALGORITHM",
    "SUPPORTED_ALGORITHMS",
    "double_hash",
    "hash_concat",
    "hash_data",
    "reduce_root",
    "HashDirection",
    "MerkleNode",
    "MerkleProof",
    "MerkleTree",
    "ProofStep",
]
