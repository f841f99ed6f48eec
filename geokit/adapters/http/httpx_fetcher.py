"""httpx fetcher adapter — implements FetcherPort."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from urllib.parse import urlsplit

import httpx

from geokit.application.ports.fetcher_port import FetcherPort
from geokit.config import settings
from geokit.domain.errors import ProviderError

logger = logging.getLogger(__name__)


class HttpxFetcher(FetcherPort):
    """Blocking GET requests through a short-lived httpx.Client."""

    def __init__(
        self,
        timeout: float | None = None,
        user_agent: str | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        self._timeout = timeout if timeout is not None else settings.geocoder_timeout
        self._user_agent = user_agent or settings.geocoder_user_agent
        self._transport = transport

    def fetch(
        self,
        url: str,
        params: Mapping[str, str | int] | None = None,
        headers: Mapping[str, str] | None = None,
        auth: tuple[str, str] | None = None,
    ) -> str:
        request_headers = {"User-Agent": self._user_agent, **(headers or {})}
        basic_auth = httpx.BasicAuth(*auth) if auth else None
        try:
            with httpx.Client(timeout=self._timeout, transport=self._transport) as client:
                response = client.get(url, params=params, headers=request_headers, auth=basic_auth)
                response.raise_for_status()
                return response.text
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning("GET %s failed: %s", url, e)
            raise ProviderError(urlsplit(url).hostname or url, str(e)) from e
