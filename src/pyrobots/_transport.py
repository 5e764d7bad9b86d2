"""HTTP transport for the robots REST resource."""

from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import Mapping
from typing import Any, Protocol

import aiohttp

from pyrobots.config import RobotsConfig
from pyrobots.exceptions import RobotsDecodeError, RobotsTransportError

_logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Structural transport interface used by endpoint modules.

    Having a protocol here makes it easy to pass test doubles/mocks while
    keeping the production implementation (`HttpTransport`) concrete.
    """

    async def request(
        self,
        method: str,
        path: str,
        payload: Mapping[str, Any] | None = None,
    ) -> Any:
        ...


class HttpTransport:
    """JSON-over-HTTP transport bound to a configured base URL."""

    def __init__(self, config: RobotsConfig, http_session: aiohttp.ClientSession) -> None:
        self._config = config
        self._http = http_session

    def _request_kwargs(self, payload: Mapping[str, Any] | None) -> dict[str, Any]:
        kwargs: dict[str, Any] = {
            "headers": {
                "accept": "application/json",
                "user-agent": self._config.user_agent,
            },
        }
        if not self._config.verify_ssl:
            kwargs["ssl"] = False
        if payload is not None:
            kwargs["json"] = dict(payload)
        if self._config.request_timeout is not None:
            kwargs["timeout"] = aiohttp.ClientTimeout(total=self._config.request_timeout)
        return kwargs

    async def request(
        self,
        method: str,
        path: str,
        payload: Mapping[str, Any] | None = None,
    ) -> Any:
        """Send one request and return the decoded JSON body.

        An empty body decodes to ``None``.  Every non-2xx status, 404
        included, is raised as :class:`RobotsTransportError`.
        """
        url = f"{self._config.base_url}{path}"
        endpoint = f"{method} {path}"

        _logger.debug("%s %s", method, url)

        try:
            async with self._http.request(method, url, **self._request_kwargs(payload)) as resp:
                body = await resp.read()
                status = resp.status
        except aiohttp.ClientError as exc:
            raise RobotsTransportError(
                f"Request to {endpoint} failed: {exc}",
                endpoint=endpoint,
            ) from exc
        except asyncio.TimeoutError as exc:
            raise RobotsTransportError(
                f"Request to {endpoint} timed out",
                endpoint=endpoint,
            ) from exc

        _logger.debug("%s %s -> HTTP %d (%d bytes)", method, url, status, len(body))

        if not 200 <= status < 300:
            # 404 is only meaningful per robot; the endpoint layer decides.
            raise RobotsTransportError(
                f"HTTP {status} from {endpoint}: {body[:200]!r}",
                status_code=status,
                endpoint=endpoint,
            )

        if not body.strip():
            return None

        try:
            return json.loads(body.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise RobotsDecodeError(
                f"Invalid JSON from {endpoint}: {body[:200]!r}",
                endpoint=endpoint,
            ) from exc
