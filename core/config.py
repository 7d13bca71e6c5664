"""Configuration management for the PowerView hub client.

This module handles:
- Loading/saving the user config file (hub address and timeout)
- Resolving the settings used to construct a Hub

Precedence, highest first: explicit value (CLI option), environment
variable, user config file. There is no built-in hub address.
"""

import json
import os
from dataclasses import dataclass
from pathlib import Path

import click

from core.errors import ConfigError

# Configuration file path
USER_CONFIG_FILE = Path.home() / '.powerview' / 'config.json'

# Environment overrides
HUB_IP_ENV = 'POWERVIEW_HUB_IP'
TIMEOUT_ENV = 'POWERVIEW_TIMEOUT'

# Seconds. Hubs answer in well under a second when healthy.
DEFAULT_TIMEOUT = 1.0


@dataclass(frozen=True)
class HubSettings:
    """Resolved connection settings for one hub."""
    ip: str
    timeout: float = DEFAULT_TIMEOUT


def load_config() -> dict:
    """Load configuration from the user config file.

    Returns:
        Dict with optional 'hub_ip' and 'timeout' keys; empty if the file
        is missing or unreadable
    """
    if not USER_CONFIG_FILE.exists():
        return {}

    try:
        with open(USER_CONFIG_FILE, 'r') as f:
            config = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        click.echo(f"Warning: Failed to load config from {USER_CONFIG_FILE}: {e}", err=True)
        return {}

    if not isinstance(config, dict):
        click.echo(f"Warning: Ignoring {USER_CONFIG_FILE}: expected a JSON object", err=True)
        return {}
    return config


def save_config(config: dict):
    """Save configuration to the user config file.

    Args:
        config: Configuration dict to save
    """
    USER_CONFIG_FILE.parent.mkdir(parents=True, exist_ok=True)

    with open(USER_CONFIG_FILE, 'w') as f:
        json.dump(config, f, indent=2)


def parse_timeout(value) -> float:
    """Convert a timeout from any source into positive seconds."""
    try:
        timeout = float(value)
    except (TypeError, ValueError):
        raise ConfigError(f"Invalid timeout {value!r}: expected a number of seconds")
    if timeout <= 0:
        raise ConfigError(f"Invalid timeout {value!r}: must be greater than zero")
    return timeout


def resolve_settings(ip: str | None = None, timeout: float | None = None) -> HubSettings:
    """Resolve hub settings from arguments, environment and config file.

    Args:
        ip: Hub address given explicitly (e.g. via --ip)
        timeout: Request timeout in seconds given explicitly

    Returns:
        HubSettings with a non-empty address

    Raises:
        ConfigError: if no address is configured anywhere, or the timeout is invalid
    """
    config = load_config()

    ip = ip or os.getenv(HUB_IP_ENV) or config.get('hub_ip')
    if not ip or not isinstance(ip, str) or not ip.strip():
        raise ConfigError(
            f"No hub address configured. Use --ip, set {HUB_IP_ENV}, "
            f"or run 'powerview configure <ip>'."
        )

    if timeout is None:
        timeout = os.getenv(TIMEOUT_ENV) or None
    if timeout is None:
        timeout = config.get('timeout')
    if timeout is None:
        timeout = DEFAULT_TIMEOUT

    return HubSettings(ip=ip.strip(), timeout=parse_timeout(timeout))
