"""
Listing commands for scenes, rooms, shades and hub information.

Every command makes fresh listing calls against the hub; nothing is cached
between invocations.
"""

import click
from core.errors import PowerViewError
from commands.helpers import fail, format_shade, get_hub


@click.command(name='list')
@click.pass_context
def list_command(ctx):
    """List scenes, rooms and shades, each sorted by name.

    \b
    Examples:
      powerview list
      powerview --ip 10.0.0.31 list
    """
    hub = get_hub(ctx)
    try:
        scenes = hub.scenes()
        rooms = hub.rooms()
        shades = hub.shades()
    except PowerViewError as e:
        fail(str(e))

    for scene in scenes.by_name():
        click.echo(f"Scene {scene.id}: {scene.name}")
    for room in rooms.by_name():
        click.echo(f"Room {room.id}: {room.name}")
    for shade in shades.by_name():
        click.echo(f"Shade {shade.id}: {shade.name} - {format_shade(shade)}")


@click.command()
@click.option('--room', '-r', help='Only show scenes in this room (exact name)')
@click.pass_context
def scenes_command(ctx, room: str | None):
    """List scenes with their rooms.

    \b
    Examples:
      powerview scenes
      powerview scenes -r "Living Room"
    """
    hub = get_hub(ctx)
    try:
        scenes = hub.scenes()
        rooms = hub.rooms()
        if room:
            listed = scenes.in_room(rooms.find(room).id)
        else:
            listed = scenes.by_name()
    except PowerViewError as e:
        fail(str(e))

    if not listed:
        click.echo("No scenes found.")
        return

    click.echo()
    click.secho(f"=== Scenes ({len(listed)}) ===", fg='cyan', bold=True)
    for scene in listed:
        room_name = rooms.name_for(scene.room.id)
        if room_name is None:
            room_name = f"room {scene.room.id}"
        click.echo(f"  {scene.id:>6}  {scene.name} [{room_name}]")
    click.echo()


@click.command()
@click.pass_context
def rooms_command(ctx):
    """List rooms."""
    hub = get_hub(ctx)
    try:
        rooms = hub.rooms()
    except PowerViewError as e:
        fail(str(e))

    if not len(rooms):
        click.echo("No rooms found.")
        return

    click.echo()
    click.secho(f"=== Rooms ({len(rooms)}) ===", fg='cyan', bold=True)
    for room in rooms.by_name():
        click.echo(f"  {room.id:>6}  {room.name}")
    click.echo()


@click.command()
@click.pass_context
def shades_command(ctx):
    """List shades with battery state and rail positions.

    Positions are raw hub values (0-65535) followed by percentages.
    """
    hub = get_hub(ctx)
    try:
        shades = hub.shades()
    except PowerViewError as e:
        fail(str(e))

    if not len(shades):
        click.echo("No shades found.")
        return

    click.echo()
    click.secho(f"=== Shades ({len(shades)}) ===", fg='cyan', bold=True)
    for shade in shades.by_name():
        click.secho(f"{shade.name}", fg='green', bold=True)
        click.echo(f"  ID: {shade.id}")
        click.echo(f"  {format_shade(shade)}")
    click.echo()


@click.command()
@click.pass_context
def info_command(ctx):
    """Show hub identity and inventory counts."""
    hub = get_hub(ctx)
    try:
        info = hub.info()
    except PowerViewError as e:
        fail(str(e))

    click.echo()
    click.secho(f"=== PowerView Hub '{info.name}' ===", fg='cyan', bold=True)
    click.echo(f"  Address:    {hub.ip}")
    click.echo(f"  Serial:     {info.serial_number}")
    click.echo(f"  MAC:        {info.mac_address}")
    click.echo(f"  Rooms:      {info.room_count}")
    click.echo(f"  Shades:     {info.shade_count}")
    click.echo(f"  Scenes:     {info.scene_count}")
    click.echo()
