"""
Helper functions shared by the CLI commands.

- get_hub: build a Hub from the global options and configuration
- fail: report a fatal error and exit with status 1
- format_shade: one-line shade summary
"""

import sys

import click
from core.config import resolve_settings
from core.errors import ConfigError
from core.hub import Hub
from models.entities import Shade


def fail(message: str):
    """Print an error to stderr and exit with status 1."""
    click.secho(f"Error: {message}", fg='red', err=True)
    sys.exit(1)


def get_hub(ctx: click.Context) -> Hub:
    """Build a Hub from the group's --ip/--timeout/--verbose options.

    Exits with status 1 if no hub address can be resolved.
    """
    options = ctx.obj or {}
    try:
        settings = resolve_settings(options.get('ip'), options.get('timeout'))
        return Hub.from_settings(settings, verbose=options.get('verbose', False))
    except ConfigError as e:
        fail(str(e))


def format_shade(shade: Shade) -> str:
    """Summarise a shade's battery and rail positions."""
    battery = f"battery {shade.battery_strength}"
    if shade.battery_is_low:
        battery = click.style(f"{battery} (LOW)", fg='red')
    return (
        f"{battery}, status {shade.battery_status}, "
        f"bottom {shade.bottom} ({shade.bottom_percent}%), "
        f"top {shade.top} ({shade.top_percent}%)"
    )
