"""
CLI entry point for Arbor.

Provides command-line access to Merkle tree roots, inclusion proofs,
whole-dataset verification and the sample hash file used by the flat
root reducer.
"""

import sys
from pathlib import Path
from typing import Optional

import click


from arbor._version import __version__
from arbor.config.settings import get_default_config_path, load_config
from arbor.exceptions import InvalidConfigurationError
from arbor.logging_config import get_logger, set_correlation_id, setup_logging
from arbor.cli.context import EXIT_RUNTIME_ERROR, CLIContext, pass_context


@click.group()
@click.option(
    '--config',
    '-c',
    type=click.Path(exists=False, dir_okay=False, path_type=Path),
    default=None,
    help=f'Path to configuration file (default: {get_default_config_path()})',
)
@click.option(
    '--log-level',
    '-l',
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'], case_sensitive=False),
    default=None,
    help='Set logging level (overrides config)',
)
@click.option(
    '--verbose',
    '-v',
    is_flag=True,
    help='Enable verbose output',
)
@click.version_option(version=__version__, prog_name='arbor')
@pass_context
def cli(ctx: CLIContext, config: Optional[Path], log_level: Optional[str], verbose: bool):
    """
    Arbor - Merkle tree commitments and inclusion proofs.

    Build Merkle roots over data blocks, generate and check inclusion
    proofs, and reduce sample hash files to a single root.
    """
    ctx.verbose = verbose
    ctx.config_path = str(config) if config else None

    # Provisional stderr logging so configuration loading is not printed to stdout
    setup_logging(level=log_level or 'WARNING', json_format=False)

    try:
        ctx.config = load_config(ctx.config_path)
    except InvalidConfigurationError as e:
        click.echo(f"Error: Invalid configuration: {e}", err=True)
        sys.exit(EXIT_RUNTIME_ERROR)

    effective_log_level = log_level.upper() if log_level else ctx.config.logging.level.upper()
    log_file = Path(ctx.config.logging.file).expanduser() if ctx.config.logging.file else None

    try:
        setup_logging(
            level=effective_log_level,
            log_file=log_file,
            json_format=ctx.config.logging.format == "json",
        )
    except OSError as e:
        click.echo(f"Error: Failed to set up logging: {e}", err=True)
        sys.exit(EXIT_RUNTIME_ERROR)

    set_correlation_id()

    if verbose:
        logger = get_logger(__name__)
        logger.info(
            "cli_started",
            config_path=ctx.config_path or 'defaults',
            log_level=effective_log_level,
            hash_algorithm=ctx.config.hashing.algorithm,
        )


# Import and register command groups
from arbor.cli.merkle import tree
from arbor.cli.samples import samples

cli.add_command(tree)
cli.add_command(samples)


if __name__ == '__main__':
    cli()
