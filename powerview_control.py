#!/usr/bin/env python3
"""
PowerView Control CLI
List and activate scenes, and move shades, on a Hunter Douglas PowerView hub.
"""

import click

from core.config import parse_timeout
from core.errors import ConfigError

from commands.setup import ColouredGroup, help_command, setup_command, configure_command
from commands.listing import list_command, scenes_command, rooms_command, shades_command, info_command
from commands.control import scene_command, shade_command

__version__ = '0.1.0'


def _timeout_option(ctx, param, value):
    if value is None:
        return None
    try:
        return parse_timeout(value)
    except ConfigError as e:
        raise click.BadParameter(str(e))


@click.group(
    cls=ColouredGroup,
    context_settings={
        'help_option_names': ['-h', '--help'],
        'max_content_width': 120
    }
)
@click.option('--ip', '-i', help='Hub address (default: POWERVIEW_HUB_IP or config file)')
@click.option('--timeout', type=float, callback=_timeout_option,
              help='Request timeout in seconds (default: 1.0)')
@click.option('--verbose', '-v', is_flag=True, help='Echo every hub request to stderr')
@click.version_option(version=__version__, prog_name='PowerView Control')
@click.pass_context
def cli(ctx, ip, timeout, verbose):
    """PowerView Control CLI - Scenes and shades on a Hunter Douglas PowerView hub.

Configuration: --ip/--timeout → environment → local config (~/.powerview/config.json)
Run 'configure <ip>' for first-time setup or 'setup' to check configuration.

Use 'help' for a quick reference of all commands."""
    ctx.obj = {'ip': ip, 'timeout': timeout, 'verbose': verbose}


# Register setup and help commands
cli.add_command(help_command)
cli.add_command(setup_command, name='setup')
cli.add_command(configure_command, name='configure')

# Register listing commands
cli.add_command(list_command)  # Uses 'list' name defined in decorator
cli.add_command(scenes_command, name='scenes')
cli.add_command(rooms_command, name='rooms')
cli.add_command(shades_command, name='shades')
cli.add_command(info_command, name='info')

# Register control commands
cli.add_command(scene_command, name='scene')
cli.add_command(shade_command, name='shade')


if __name__ == '__main__':
    cli()
