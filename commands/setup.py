"""
Setup and help commands for PowerView Control CLI.

Contains custom Click group class for coloured help output and typo suggestions.
"""

import os
from dataclasses import dataclass

import click
from core.config import (
    HUB_IP_ENV,
    TIMEOUT_ENV,
    USER_CONFIG_FILE,
    load_config,
    parse_timeout,
    resolve_settings,
    save_config,
)
from core.errors import ConfigError, PowerViewError
from commands.helpers import fail, get_hub
from models.utils import similarity_score


@dataclass(frozen=True)
class CommandSection:
    """Represents a section in the help command."""
    name: str
    commands: list[tuple[str, str]]


class ColouredGroup(click.Group):
    """Custom Group class that adds colour to help output and suggests similar commands."""

    def resolve_command(self, ctx, args):
        """Resolve command with suggestions for typos."""
        try:
            return super().resolve_command(ctx, args)
        except click.UsageError as e:
            if 'No such command' in str(e):
                cmd_name = args[0] if args else ''
                suggestions = self._get_suggestions(ctx, cmd_name)

                if suggestions:
                    error_msg = f"Error: No such command '{cmd_name}'.\n\n"
                    error_msg += click.style("Did you mean one of these?\n", fg='yellow')
                    for suggestion in suggestions:
                        error_msg += click.style(f"  • {suggestion}\n", fg='green')
                    raise click.UsageError(error_msg)
            raise

    def _get_suggestions(self, ctx, cmd_name, max_suggestions=3):
        """Get command suggestions based on similarity."""
        if not cmd_name:
            return []

        suggestions = []
        for command in self.list_commands(ctx):
            cmd_obj = self.get_command(ctx, command)
            if cmd_obj and not cmd_obj.hidden:
                score = similarity_score(cmd_name, command)
                if score > 0:
                    suggestions.append((score, command))

        suggestions.sort(reverse=True, key=lambda x: x[0])
        return [cmd for score, cmd in suggestions[:max_suggestions]]

    def format_usage(self, ctx, formatter):
        """Format the usage line with colour."""
        formatter.write_paragraph()
        formatter.write_text(
            click.style('Usage: ', fg='cyan', bold=True) +
            click.style(f'{ctx.command_path} [OPTIONS] COMMAND [ARGS]...', fg='white')
        )

    def format_commands(self, ctx, formatter):
        """Format commands with colour."""
        commands = []
        for subcommand in self.list_commands(ctx):
            cmd = self.get_command(ctx, subcommand)
            if cmd is None or cmd.hidden:
                continue
            commands.append((subcommand, cmd.get_short_help_str(limit=500)))

        if commands:
            formatter.write_paragraph()
            formatter.write_text(click.style('Commands:', fg='yellow', bold=True))

            max_len = max(max(len(cmd[0]) for cmd in commands), 12)

            with formatter.indentation():
                for subcommand, help_text in commands:
                    formatter.write_text(
                        click.style(subcommand.ljust(max_len), fg='green') + '  ' +
                        click.style(help_text, fg='white', dim=True)
                    )


COMMAND_SECTIONS = [
    CommandSection(
        name="CONFIGURATION",
        commands=[
            ("configure <ip>", "Save the hub address to the user config file"),
            ("setup", "Show configuration sources and test the hub"),
            ("info", "Hub serial number, name and inventory counts"),
        ]
    ),
    CommandSection(
        name="LISTING",
        commands=[
            ("list", "Scenes, rooms and shades, sorted by name"),
            ("scenes [-r <room>]", "Scenes with their rooms"),
            ("rooms", "Rooms"),
            ("shades", "Shades with battery and positions"),
        ]
    ),
    CommandSection(
        name="CONTROL",
        commands=[
            ("scene <name>", "Activate a scene"),
            ("shade <name> <bottom> <top>", "Move a shade (raw 0-65535)"),
            ("shade <name> <bottom> <top> -p", "Move a shade (percent 0-100)"),
        ]
    ),
]


@click.command(name='help')
def help_command():
    """Display help and common commands."""
    click.echo()
    click.secho("PowerView Control - Quick Reference", fg='cyan', bold=True)
    click.echo()

    for section in COMMAND_SECTIONS:
        click.secho(section.name, fg='yellow', bold=True)
        for cmd, desc in section.commands:
            click.echo("  ", nl=False)
            click.secho(cmd, fg='green', nl=False)
            click.echo(" " * (34 - len(cmd)) + "  " + desc)
        click.echo()

    click.secho("Global options:", fg='yellow', bold=True)
    click.echo(f"  --ip <address>   Hub address (or {HUB_IP_ENV})")
    click.echo(f"  --timeout <s>    Request timeout in seconds (or {TIMEOUT_ENV})")
    click.echo("  -v, --verbose    Echo every hub request to stderr")
    click.echo()


@click.command()
@click.argument('ip')
@click.option('--timeout', '-t', type=float, help='Request timeout in seconds')
def configure_command(ip: str, timeout: float | None):
    """Save the hub address (and optionally the timeout) to the user config file.

    \b
    Examples:
      powerview configure 10.0.0.31
      powerview configure 10.0.0.31 --timeout 0.5
    """
    ip = ip.strip()
    if not ip:
        fail("Hub address cannot be empty")

    config = load_config()
    config['hub_ip'] = ip
    if timeout is not None:
        try:
            config['timeout'] = parse_timeout(timeout)
        except ConfigError as e:
            fail(str(e))

    try:
        save_config(config)
    except OSError as e:
        fail(f"Failed to save config to {USER_CONFIG_FILE}: {e}")

    click.secho(f"✓ Hub address {ip} saved to {USER_CONFIG_FILE}", fg='green')


@click.command()
@click.pass_context
def setup_command(ctx):
    """Show current hub configuration and test the connection.

    Configuration sources (priority order):
    1. --ip / --timeout options
    2. Environment (POWERVIEW_HUB_IP, POWERVIEW_TIMEOUT)
    3. Local config file (~/.powerview/config.json)
    """
    options = ctx.obj or {}

    click.echo()
    click.secho("=== PowerView Hub Configuration ===", fg='cyan', bold=True)
    click.echo()

    click.echo(click.style("1. Command line", fg='cyan', bold=True))
    click.echo(f"   --ip:        {options.get('ip') or '(not given)'}")
    click.echo(f"   --timeout:   {options.get('timeout') or '(not given)'}")
    click.echo()

    click.echo(click.style("2. Environment", fg='cyan', bold=True))
    click.echo(f"   {HUB_IP_ENV}:  {os.getenv(HUB_IP_ENV) or '(not set)'}")
    click.echo(f"   {TIMEOUT_ENV}: {os.getenv(TIMEOUT_ENV) or '(not set)'}")
    click.echo()

    click.echo(click.style("3. Local Configuration", fg='cyan', bold=True))
    config = load_config()
    if config:
        click.echo(f"   Status:      {click.style('✓ Available', fg='green')}")
        click.echo(f"   Path:        {USER_CONFIG_FILE}")
        click.echo(f"   Hub IP:      {config.get('hub_ip', '(not set)')}")
        click.echo(f"   Timeout:     {config.get('timeout', '(default)')}")
    else:
        click.echo(f"   Status:      {click.style('✗ Not configured', fg='yellow')}")
        click.echo(f"   Path:        {USER_CONFIG_FILE} (does not exist)")
    click.echo()

    try:
        settings = resolve_settings(options.get('ip'), options.get('timeout'))
    except ConfigError as e:
        click.secho(f"⚠ {e}", fg='yellow', bold=True)
        click.echo()
        return

    click.echo(click.style("Connection Test", fg='cyan', bold=True))
    click.echo(f"Testing hub at {settings.ip} (timeout {settings.timeout}s)...")

    hub = get_hub(ctx)
    try:
        info = hub.info()
    except PowerViewError as e:
        click.secho(f"✗ Connection failed: {e}", fg='red', bold=True)
        click.echo()
        ctx.exit(1)

    click.secho(f"✓ Connected to hub '{info.name}' at {hub.ip}", fg='green', bold=True)
    click.echo(f"  Serial:     {info.serial_number}")
    click.echo(f"  MAC:        {info.mac_address}")
    click.echo()
