"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Arbor, a product of Garudex Labs

CLI context for Arbor.

Provides shared context object and decorators for CLI commands.
"""

import click

from arbor.config.settings import ArborConfig, get_default_config

# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1
EXIT_VERIFICATION_FAILED = 2


# Global context object to share configuration across commands
class CLIContext:
    """Context object for CLI commands."""
    
    def __init__(self):
        self.config = None
        self.config_path = None
        self.verbose = False


pass_context = click.make_pass_decorator(CLIContext, ensure=True)


def get_config(ctx: CLIContext) -> ArborConfig:
    """Return the loaded configuration, or defaults when no group ran."""
    return ctx.config if ctx.config is not None else get_default_config()
