"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Arbor, a product of Garudex Labs

Merkle tree implementation with inclusion proofs.

This module implements a binary Merkle tree built bottom-up from an ordered
list of data blocks. It supports:
- Tree construction with per-level duplication of an unpaired last node
- Whole-dataset verification against a known root
- Inclusion proof generation by depth-first search
- Standalone proof verification that needs no tree
"""

import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, NamedTuple, Optional, Sequence, Tuple

from arbor.exceptions import EmptyTreeError
from arbor.logging_config import (
    get_logger,
    log_merkle_root_computation,
    log_merkle_verification,
    log_proof_generation,
)
from arbor.merkle.hashing import (
    DEFAULT_ALGORITHM,
    hash_concat,
    hash_data,
    validate_algorithm,
)

logger = get_logger(__name__)


class HashDirection(str, Enum):
    """Side on which a proof's sibling digest is placed when recombining."""
    LEFT = "left"
    RIGHT = "right"


class ProofStep(NamedTuple):
    """One level of an inclusion proof."""
    direction: HashDirection
    sibling: bytes


@dataclass(frozen=True)
class MerkleProof:
    """
    Proof that a data block is included in a Merkle tree.

    Steps are ordered from the leaf upward to the root. Sibling digests are
    copies, so a proof stays valid after the tree that produced it is gone.

    Attributes:
        steps: (direction, sibling digest) pairs, leaf to root
    """
    steps: Tuple[ProofStep, ...] = ()

    def __len__(self) -> int:
        return len(self.steps)

    def __iter__(self) -> Iterator[ProofStep]:
        return iter(self.steps)

    @property
    def sibling_hashes(self) -> List[bytes]:
        return [step.sibling for step in self.steps]

    @property
    def directions(self) -> List[HashDirection]:
        return [step.direction for step in self.steps]


@dataclass(frozen=True)
class MerkleNode:
    """
    A node of the tree.

    Leaves carry the digest of one data block and have no children. Internal
    nodes always have both children and carry the digest of their
    concatenated child digests.
    """
    digest: bytes
    left: Optional["MerkleNode"] = field(default=None, repr=False)
    right: Optional["MerkleNode"] = field(default=None, repr=False)

    @classmethod
    def leaf(cls, data: bytes, algorithm: str = DEFAULT_ALGORITHM) -> "MerkleNode":
        return cls(digest=hash_data(data, algorithm))

    @classmethod
    def parent(
        cls,
        left: "MerkleNode",
        right: "MerkleNode",
        algorithm: str = DEFAULT_ALGORITHM,
    ) -> "MerkleNode":
        return cls(
            digest=hash_concat(left.digest, right.digest, algorithm),
            left=left,
            right=right,
        )

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


class MerkleTree:
    """
    Binary Merkle tree over an ordered sequence of data blocks.

    The tree is built bottom-up. Each leaf holds the digest of one block and
    each internal node holds the digest of its two children concatenated. If
    a level has an odd number of nodes, the last node is paired with itself;
    this happens independently at every level. Nodes are immutable, so the
    duplicated node is shared rather than copied.

    The tree never changes after construction and may be read from several
    threads without locking.

    Example:
        >>> blocks = [b"data1", b"data2", b"data3"]
        >>> tree = MerkleTree(blocks)
        >>> proof = tree.prove(blocks[0])
        >>> MerkleTree.verify_proof(blocks[0], proof, tree.root())
        True
    """

    def __init__(self, blocks: Sequence[bytes], algorithm: str = DEFAULT_ALGORITHM):
        """
        Build Merkle tree from data blocks.

        Args:
            blocks: Ordered, non-empty sequence of data blocks
            algorithm: hashlib algorithm name (default: sha256)

        Raises:
            EmptyTreeError: If blocks is empty
            UnsupportedHashAlgorithmError: If the algorithm is not supported
        """
        if not blocks:
            raise EmptyTreeError("Cannot create Merkle tree from empty blocks list")

        self.algorithm = validate_algorithm(algorithm)
        self.leaf_count = len(blocks)

        start_time = time.perf_counter()
        self._root = self._build(blocks)
        duration_ms = (time.perf_counter() - start_time) * 1000

        log_merkle_root_computation(
            logger,
            leaf_count=self.leaf_count,
            merkle_root=self._root.digest.hex(),
            duration_ms=duration_ms,
            algorithm=self.algorithm,
        )

    @classmethod
    def construct(cls, blocks: Sequence[bytes], algorithm: str = DEFAULT_ALGORITHM) -> "MerkleTree":
        """Construct a Merkle tree from the given data blocks."""
        return cls(blocks, algorithm)

    def _build(self, blocks: Sequence[bytes]) -> MerkleNode:
        nodes = [MerkleNode.leaf(block, self.algorithm) for block in blocks]

        while len(nodes) > 1:
            next_level = []
            for i in range(0, len(nodes), 2):
                left = nodes[i]
                # Unpaired last node is paired with itself
                right = nodes[i + 1] if i + 1 < len(nodes) else left
                next_level.append(MerkleNode.parent(left, right, self.algorithm))
            nodes = next_level

        return nodes[0]

    @property
    def root_node(self) -> MerkleNode:
        return self._root

    @property
    def depth(self) -> int:
        """Number of levels from the leaves to the root, inclusive."""
        depth = 1
        node = self._root
        while node.left is not None:
            node = node.left
            depth += 1
        return depth

    def root(self) -> bytes:
        """
        Get the Merkle root hash.

        Returns:
            Root digest of the tree
        """
        return self._root.digest

    @staticmethod
    def verify(
        blocks: Sequence[bytes],
        expected_root: bytes,
        algorithm: str = DEFAULT_ALGORITHM,
    ) -> bool:
        """
        Verify that the given blocks produce the expected root.

        This rebuilds the whole tree, so it is linear in the number of
        blocks. Use ``verify_proof`` to check a single block.

        Args:
            blocks: Complete ordered sequence of data blocks
            expected_root: Root digest to compare against
            algorithm: hashlib algorithm name (default: sha256)

        Returns:
            True if the rebuilt root equals expected_root, False otherwise
        """
        if not blocks:
            log_merkle_verification(logger, success=False, failure_reason="no blocks")
            return False

        computed_root = MerkleTree(blocks, algorithm).root()
        success = computed_root == expected_root
        log_merkle_verification(
            logger,
            success=success,
            failure_reason=None if success else "root mismatch",
            leaf_count=len(blocks),
        )
        return success

    def prove(self, data: bytes) -> Optional[MerkleProof]:
        """
        Generate an inclusion proof for a data block.

        The tree is searched depth-first, left subtree before right, for a
        leaf whose digest equals the digest of ``data``. If several leaves
        hold the same content, the proof is for the first one in that order.

        Args:
            data: Data block to prove

        Returns:
            MerkleProof ordered leaf to root, or None if data is not in the tree
        """
        target = hash_data(data, self.algorithm)
        steps: List[ProofStep] = []

        if not self._find_proof(self._root, target, steps):
            log_proof_generation(logger, found=False)
            return None

        log_proof_generation(logger, found=True, proof_length=len(steps))
        return MerkleProof(steps=tuple(steps))

    def _find_proof(self, node: MerkleNode, target: bytes, steps: List[ProofStep]) -> bool:
        if node.is_leaf:
            return node.digest == target

        # Steps are appended while unwinding, which yields leaf-to-root order
        if self._find_proof(node.left, target, steps):
            steps.append(ProofStep(HashDirection.RIGHT, node.right.digest))
            return True

        if self._find_proof(node.right, target, steps):
            steps.append(ProofStep(HashDirection.LEFT, node.left.digest))
            return True

        return False

    @staticmethod
    def verify_proof(
        data: bytes,
        proof: Optional[MerkleProof],
        expected_root: bytes,
        algorithm: str = DEFAULT_ALGORITHM,
    ) -> bool:
        """
        Verify an inclusion proof.

        Recomputes the root from the data block and the proof's sibling
        digests, then compares it with the expected root. No tree is needed.

        Args:
            data: Original data block (will be hashed)
            proof: Inclusion proof for the block, or None from a failed lookup
            expected_root: Root digest the proof should lead to
            algorithm: hashlib algorithm name (default: sha256)

        Returns:
            True if the proof is valid, False otherwise
        """
        algorithm = validate_algorithm(algorithm)

        if proof is None:
            log_merkle_verification(logger, success=False, failure_reason="no proof")
            return False

        current_hash = hash_data(data, algorithm)

        for step_index, (direction, sibling) in enumerate(proof):
            if not isinstance(sibling, (bytes, bytearray)):
                log_merkle_verification(
                    logger, success=False, failure_reason="malformed sibling", step=step_index
                )
                return False

            if direction is HashDirection.LEFT:
                current_hash = hash_concat(bytes(sibling), current_hash, algorithm)
            elif direction is HashDirection.RIGHT:
                current_hash = hash_concat(current_hash, bytes(sibling), algorithm)
            else:
                log_merkle_verification(
                    logger, success=False, failure_reason="unknown direction", step=step_index
                )
                return False

        success = current_hash == expected_root
        log_merkle_verification(
            logger,
            success=success,
            failure_reason=None if success else "root mismatch",
            proof_length=len(proof),
        )
        return success
