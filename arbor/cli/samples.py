"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Arbor, a product of Garudex Labs

CLI commands for the sample hash file.

Provides commands for:
- Generating a file of random hex hashes
- Reducing such a file to a single double-hashed root
"""

import sys
from pathlib import Path

import click

from arbor.cli.context import EXIT_RUNTIME_ERROR, CLIContext, get_config, pass_context
from arbor.exceptions import ArborError
from arbor.logging_config import get_logger
from arbor.merkle import reduce_root
from arbor.samples import decode_hashes, read_hashes_from_file, write_sample_hashes

logger = get_logger(__name__)


@click.group()
def samples():
    """Sample hash files for the flat root reducer."""
    pass


@samples.command("generate")
@click.option(
    "--out",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Output file (default: from configuration)",
)
@click.option(
    "--count",
    "-n",
    type=click.IntRange(min=1),
    default=None,
    help="Number of hashes to generate (default: from configuration)",
)
@click.option(
    "--length",
    "-L",
    type=click.IntRange(min=2),
    default=None,
    help="Hex characters per hash (default: from configuration)",
)
@pass_context
def generate(ctx: CLIContext, out, count, length):
    """
    Write random hex hashes to a file, one per line.

    Examples:

        arbor samples generate

        arbor samples generate --out hashes.txt --count 32
    """
    config = get_config(ctx)
    path = out or Path(config.samples.file)
    count = count or config.samples.count
    length = length or config.samples.length

    if length % 2 != 0:
        click.echo(f"Error: --length must be even, got {length}", err=True)
        sys.exit(EXIT_RUNTIME_ERROR)

    try:
        write_sample_hashes(path, count=count, length=length)
    except ArborError as e:
        click.echo(f"Error generating sample hashes: {e}", err=True)
        sys.exit(EXIT_RUNTIME_ERROR)

    click.echo(f"✓ Wrote {count} hashes to {path}")


@samples.command("reduce")
@click.option(
    "--file",
    "-f",
    "file_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Sample hash file (default: from configuration)",
)
@pass_context
def reduce(ctx: CLIContext, file_path):
    """
    Reduce a sample hash file to a single root.

    Each round pairs consecutive hashes and double-hashes each pair. The
    result is not comparable with `arbor tree root`.

    Examples:

        arbor samples reduce --file ts_hashes.json
    """
    config = get_config(ctx)
    path = file_path or Path(config.samples.file)

    try:
        digests = decode_hashes(read_hashes_from_file(path))
        if not digests:
            click.echo("No valid values found in the input file.", err=True)
            return

        if ctx.verbose:
            click.echo(f"Hashes: {len(digests)}")

        merkle_root = reduce_root(digests, config.hashing.algorithm)
    except ArborError as e:
        click.echo(f"Error reducing sample hashes: {e}", err=True)
        logger.error(f"Failed to reduce sample hashes: {e}")
        sys.exit(EXIT_RUNTIME_ERROR)

    click.echo(f"Merkle Root: {merkle_root.hex()}")
