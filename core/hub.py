"""Hub class for PowerView hub API interactions.

This module contains the Hub that handles all HTTP communication with a
Hunter Douglas PowerView hub on the local network, and the listing
operations that turn hub responses into Scenes, Rooms and Shades.
"""

import click
import requests
from requests.adapters import HTTPAdapter

from core.config import DEFAULT_TIMEOUT, HubSettings
from core.decode import HubInfo, decode_rooms, decode_scenes, decode_shades, decode_user_data
from core.errors import ConfigError, HubConnectionError, HubError, HubTimeoutError
from models.collections import Rooms, Scenes, Shades
from models.types import JSON_CONTENT_TYPE, ROOMS_PATH, SCENES_PATH, SHADES_PATH, USER_DATA_PATH


class EmptyQueryAdapter(HTTPAdapter):
    """HTTPAdapter that keeps a trailing empty query string on the wire.

    requests rebuilds the request target from the parsed URL, which turns
    '/api/shades?' into '/api/shades'. Hub firmware hangs on the latter, so
    when the prepared URL still ends in '?' the marker is put back.
    """

    def request_url(self, request, proxies):
        url = super().request_url(request, proxies)
        if request.url.endswith('?') and not url.endswith('?'):
            url += '?'
        return url


class Hub:
    """A PowerView hub reachable at a fixed address.

    The address and timeout are fixed at construction. Scenes, rooms and
    shades obtained from a Hub keep a reference to it and send their
    commands through request().

    The timeout bounds the connect and each socket read separately, as
    requests applies it. It is not a deadline on the whole exchange: a hub
    that keeps trickling bytes can take longer than timeout in total.
    """

    def __init__(self, ip: str, timeout: float = DEFAULT_TIMEOUT, verbose: bool = False):
        """Initialise Hub.

        Args:
            ip: Hub address (IPv4 address or host name)
            timeout: Per-request timeout in seconds
            verbose: If True, echo every request to stderr
        """
        ip = ip.strip() if ip else ''
        if not ip:
            raise ConfigError("Hub address cannot be empty")
        if timeout <= 0:
            raise ConfigError(f"Hub timeout must be greater than zero, got {timeout}")

        self._ip = ip
        self._timeout = timeout
        self.verbose = verbose
        self.session = requests.Session()
        self.session.mount('http://', EmptyQueryAdapter())

    @classmethod
    def from_settings(cls, settings: HubSettings, verbose: bool = False) -> 'Hub':
        return cls(settings.ip, timeout=settings.timeout, verbose=verbose)

    @property
    def ip(self) -> str:
        return self._ip

    @property
    def timeout(self) -> float:
        return self._timeout

    @property
    def base_url(self) -> str:
        return f"http://{self._ip}"

    def __repr__(self) -> str:
        return f"Hub(ip={self._ip!r}, timeout={self._timeout!r})"

    def request(self, method: str, path: str, body: str | None = None,
                keep_empty_query: bool = False) -> bytes:
        """Make one request to the hub and return the raw response body.

        Args:
            method: 'GET' or 'PUT'
            path: Path on the hub, starting with '/'
            body: Literal JSON body, sent with a JSON content type
            keep_empty_query: Send a trailing '?' in path verbatim. Listing
                endpoints need it; some firmware hangs without it.

        Returns:
            The response body

        Raises:
            HubTimeoutError: if the hub does not answer within the timeout
            ConfigError: if the hub address does not form a valid URL
            HubConnectionError: if the hub cannot be reached
            HubError: if the hub answers with any status other than 200
        """
        headers = {}
        data = None
        if body is not None:
            headers['Content-Type'] = JSON_CONTENT_TYPE
            data = body.encode('utf-8')

        try:
            prepared = self.session.prepare_request(
                requests.Request(method, f"{self.base_url}{path}", headers=headers, data=data)
            )
        except requests.exceptions.InvalidURL as e:
            raise ConfigError(f"invalid hub address {self._ip!r}: {e}") from e
        if keep_empty_query and path.endswith('?') and not prepared.url.endswith('?'):
            prepared.url += '?'

        if self.verbose:
            click.echo(f"{method} {prepared.url}", err=True)
            if body is not None:
                click.echo(f"  {body}", err=True)

        try:
            response = self.session.send(prepared, timeout=(self._timeout, self._timeout))
        except requests.exceptions.Timeout as e:
            raise HubTimeoutError(
                f"powerview hub at {self._ip} did not answer {method} {path} within {self._timeout}s"
            ) from e
        except requests.exceptions.InvalidURL as e:
            raise ConfigError(f"invalid hub address {self._ip!r}: {e}") from e
        except requests.exceptions.RequestException as e:
            raise HubConnectionError(f"cannot reach powerview hub at {self._ip}: {e}") from e

        with response:
            if response.status_code != 200:
                raise HubError(response.status_code, response.reason or '')
            return response.content

    def get(self, path: str) -> bytes:
        """GET path. A trailing '?' is kept on the wire."""
        return self.request('GET', path, keep_empty_query=path.endswith('?'))

    def scenes(self) -> Scenes:
        """Query the hub for its scenes."""
        return Scenes.from_records(self, decode_scenes(self.get(f"{SCENES_PATH}?")))

    def rooms(self) -> Rooms:
        """Query the hub for its rooms."""
        return Rooms.from_records(self, decode_rooms(self.get(f"{ROOMS_PATH}?")))

    def shades(self) -> Shades:
        """Query the hub for its shades."""
        return Shades.from_records(self, decode_shades(self.get(f"{SHADES_PATH}?")))

    def info(self) -> HubInfo:
        """Query the hub for its identity and inventory counts."""
        return decode_user_data(self.get(USER_DATA_PATH))
