"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Arbor, a product of Garudex Labs

Arbor - Merkle tree commitments and inclusion proofs

Arbor builds a binary hash tree over an ordered list of data blocks,
producing a single root that commits to every block, and generates and
verifies compact inclusion proofs against that root.
"""

from arbor._version import __version__
from arbor.merkle import HashDirection, MerkleProof, MerkleTree, reduce_root

__all__ = [
    "__version__",
    "HashDirection",
    "MerkleProof",
    "MerkleTree",
    "reduce_root",
]
