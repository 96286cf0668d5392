from __future__ import annotations

import datetime
import time
from email.utils import parsedate_to_datetime
from typing import Protocol, runtime_checkable

import requests

from libtotp._logging import logger
from libtotp.exc import ClockUnavailableError

__all__ = ["ClockSource", "LocalMachineTimeProvider", "HttpTimeProvider"]


@runtime_checkable
class ClockSource(Protocol):
    def now(self) -> int:
        """current unix time in seconds, raising ClockUnavailableError on failure."""
        ...


class LocalMachineTimeProvider:
    def now(self) -> int:
        return int(time.time())


class HttpTimeProvider:
    """
    Takes the time from any webserver, by issuing a HEAD request
    to **url** and parsing the ``Date:`` header of the response.

    :param url: url to query, defaults to ``https://google.com``.
    :param timeout: seconds to wait for the server.
    :param verify_ssl: whether to verify the server's certificate.
    :param headers: request headers, replacing the defaults.
    """

    DEFAULT_HEADERS = {
        "Connection": "close",
        "User-Agent": "libtotp HttpTimeProvider",
        "Cache-Control": "no-cache",
    }

    def __init__(
        self,
        url: str = "https://google.com",
        timeout: float = 10.0,
        verify_ssl: bool = True,
        headers: dict[str, str] | None = None,
    ) -> None:
        self.url = url
        self.timeout = timeout
        self.verify_ssl = verify_ssl
        self.headers = dict(self.DEFAULT_HEADERS if headers is None else headers)

    def now(self) -> int:
        logger.debug("requesting time from %s", self.url)
        try:
            response = requests.head(
                self.url,
                headers=self.headers,
                timeout=self.timeout,
                verify=self.verify_ssl,
                allow_redirects=False,
            )
        except requests.RequestException as err:
            msg = f"Unable to retrieve time from {self.url} ({err})"
            raise ClockUnavailableError(msg) from err

        value = response.headers.get("Date")
        if not value:
            msg = f'Unable to retrieve time from {self.url} (Invalid or no "Date:" header found)'
            raise ClockUnavailableError(msg)
        try:
            date = parsedate_to_datetime(value)
        except (TypeError, ValueError) as err:
            msg = f"Unable to retrieve time from {self.url} (malformed date {value!r})"
            raise ClockUnavailableError(msg) from err
        if date.tzinfo is None:
            # "-0000" zone parses as naive, but HTTP dates are always GMT
            date = date.replace(tzinfo=datetime.timezone.utc)
        return int(date.timestamp())
