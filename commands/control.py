"""
Control commands for activating scenes and moving shades.
"""

import click
from core.errors import PowerViewError
from commands.helpers import fail, format_shade, get_hub
from models.types import MAX_POSITION
from models.utils import percent_to_position


@click.command()
@click.argument('name')
@click.pass_context
def scene_command(ctx, name: str):
    """Activate a scene by its name.

    \b
    Examples:
      powerview scene "Morning"
    """
    hub = get_hub(ctx)
    try:
        scene = hub.scenes().find(name)
        scene.activate()
    except PowerViewError as e:
        fail(f"error switching to scene {name!r}: {e}")

    click.secho(f"✓ Scene '{scene.name}' activated", fg='green')


@click.command()
@click.argument('name')
@click.argument('bottom', type=int)
@click.argument('top', type=int)
@click.option('--percent', '-p', is_flag=True, help='BOTTOM and TOP are percentages (0-100)')
@click.pass_context
def shade_command(ctx, name: str, bottom: int, top: int, percent: bool):
    """Move a shade's bottom and top rails.

    BOTTOM and TOP are raw hub positions (0-65535), or percentages with -p.

    \b
    Examples:
      powerview shade "Kitchen" 65535 0
      powerview shade "Kitchen" 50 0 --percent
    """
    limit = 100 if percent else MAX_POSITION
    for label, value in (('BOTTOM', bottom), ('TOP', top)):
        if not 0 <= value <= limit:
            raise click.BadParameter(f"must be between 0 and {limit}, got {value}", param_hint=label)
    if percent:
        bottom, top = percent_to_position(bottom), percent_to_position(top)

    hub = get_hub(ctx)
    try:
        shade = hub.shades().find(name)
        shade.move(bottom, top)
    except PowerViewError as e:
        fail(f"error moving shade {name!r}: {e}")

    click.secho(f"✓ Moved shade '{shade.name}'", fg='green')
    click.echo(f"  {format_shade(shade)}")
