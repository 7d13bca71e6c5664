"""Exceptions raised by the PowerView hub client.

Every error derives from PowerViewError so callers (the CLI in particular)
can report any hub failure with a single except clause.
"""


class PowerViewError(Exception):
    """Base class for all PowerView client errors."""


class ConfigError(PowerViewError):
    """No usable hub address or timeout could be resolved."""


class HubTimeoutError(PowerViewError):
    """The hub did not answer within the request timeout."""


class HubConnectionError(PowerViewError):
    """The hub could not be reached at all."""


class HubError(PowerViewError):
    """The hub answered with a non-200 status."""

    def __init__(self, status_code: int, status_text: str):
        self.status_code = status_code
        self.status_text = status_text
        super().__init__(f"powerview hub: {status_code} {status_text}".rstrip())


class DecodeError(PowerViewError):
    """A hub response did not have the expected JSON shape."""


class NilEntityError(PowerViewError):
    """An operation was invoked on a scene, room or shade that does not exist."""
