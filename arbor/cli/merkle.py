"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Arbor, a product of Garudex Labs

CLI commands for Merkle tree operations.

Provides commands for:
- Computing the root of a set of data blocks
- Generating and checking an inclusion proof for one block
- Verifying a complete set of blocks against a published root
"""

import sys
from typing import List, Optional, Sequence

import click

from arbor.cli.context import (
    EXIT_RUNTIME_ERROR,
    EXIT_VERIFICATION_FAILED,
    CLIContext,
    get_config,
    pass_context,
)
from arbor.exceptions import ArborError
from arbor.logging_config import get_logger
from arbor.merkle import SUPPORTED_ALGORITHMS, MerkleTree

logger = get_logger(__name__)


def _decode_blocks(values: Sequence[str], as_hex: bool) -> List[bytes]:
    """Turn command-line values into data blocks (UTF-8 text or hex)."""
    if as_hex:
        return [bytes.fromhex(value) for value in values]
    return [value.encode("utf-8") for value in values]


def _algorithm(ctx: CLIContext, algorithm: Optional[str]) -> str:
    return algorithm or get_config(ctx).hashing.algorithm


hex_option = click.option(
    "--hex",
    "as_hex",
    is_flag=True,
    help="Treat blocks as hex-encoded bytes instead of UTF-8 text",
)

algorithm_option = click.option(
    "--algorithm",
    "-a",
    type=click.Choice(SUPPORTED_ALGORITHMS, case_sensitive=False),
    default=None,
    help="Hash algorithm (default: from configuration)",
)


@click.group()
def tree():
    """Merkle tree roots and inclusion proofs."""
    pass


@tree.command("root")
@click.argument("blocks", nargs=-1, required=True)
@hex_option
@algorithm_option
@pass_context
def root(ctx: CLIContext, blocks, as_hex, algorithm):
    """
    Compute the Merkle root of BLOCKS, in the order given.

    Examples:

        arbor tree root alpha beta gamma

        arbor tree root --hex 00 01 02 03
    """
    try:
        data = _decode_blocks(blocks, as_hex)
        merkle_tree = MerkleTree(data, _algorithm(ctx, algorithm))
    except (ArborError, ValueError) as e:
        click.echo(f"Error computing Merkle root: {e}", err=True)
        logger.error(f"Failed to compute Merkle root: {e}")
        sys.exit(EXIT_RUNTIME_ERROR)

    click.echo(f"Merkle Root: {merkle_tree.root().hex()}")
    if ctx.verbose:
        click.echo(f"  Leaves: {merkle_tree.leaf_count}")
        click.echo(f"  Depth: {merkle_tree.depth}")
        click.echo(f"  Algorithm: {merkle_tree.algorithm}")


@tree.command("prove")
@click.option(
    "--target",
    "-t",
    required=True,
    help="Block to prove membership for",
)
@click.argument("blocks", nargs=-1, required=True)
@hex_option
@algorithm_option
@pass_context
def prove(ctx: CLIContext, target, blocks, as_hex, algorithm):
    """
    Generate an inclusion proof for TARGET within BLOCKS.

    The proof is printed leaf to root and checked against the tree's root.
    Exits with status 2 if TARGET is not one of the blocks.

    Examples:

        arbor tree prove --target beta alpha beta gamma
    """
    try:
        data = _decode_blocks(blocks, as_hex)
        target_block = _decode_blocks([target], as_hex)[0]
        merkle_tree = MerkleTree(data, _algorithm(ctx, algorithm))
    except (ArborError, ValueError) as e:
        click.echo(f"Error building Merkle tree: {e}", err=True)
        logger.error(f"Failed to build Merkle tree: {e}")
        sys.exit(EXIT_RUNTIME_ERROR)

    merkle_root = merkle_tree.root()
    click.echo(f"Merkle Root: {merkle_root.hex()}")

    proof = merkle_tree.prove(target_block)
    if proof is None:
        click.echo(f"✗ Block not found in tree: {target}", err=True)
        sys.exit(EXIT_VERIFICATION_FAILED)

    click.echo(f"Proof (leaf to root, {len(proof)} steps):")
    for position, step in enumerate(proof, start=1):
        click.echo(f"  {position}. {step.direction.value:<5} {step.sibling.hex()}")

    if MerkleTree.verify_proof(target_block, proof, merkle_root, merkle_tree.algorithm):
        click.echo("✓ Proof verifies against root")
    else:
        click.echo("✗ Proof does not verify against root", err=True)
        sys.exit(EXIT_VERIFICATION_FAILED)


@tree.command("verify")
@click.option(
    "--root",
    "-r",
    "expected_root",
    required=True,
    help="Expected Merkle root (hex)",
)
@click.argument("blocks", nargs=-1, required=True)
@hex_option
@algorithm_option
@pass_context
def verify(ctx: CLIContext, expected_root, blocks, as_hex, algorithm):
    """
    Verify that BLOCKS, in order, produce the expected root.

    This rebuilds the whole tree. Exits with status 2 on mismatch.

    Examples:

        arbor tree verify --root 9675e04b... --hex 00 01 02 03
    """
    try:
        root_bytes = bytes.fromhex(expected_root)
        data = _decode_blocks(blocks, as_hex)
        matches = MerkleTree.verify(data, root_bytes, _algorithm(ctx, algorithm))
    except (ArborError, ValueError) as e:
        click.echo(f"Error verifying blocks: {e}", err=True)
        logger.error(f"Failed to verify blocks: {e}")
        sys.exit(EXIT_RUNTIME_ERROR)

    if matches:
        click.echo("✓ Blocks match the expected root")
    else:
        click.echo("✗ Blocks do not match the expected root", err=True)
        sys.exit(EXIT_VERIFICATION_FAILED)
