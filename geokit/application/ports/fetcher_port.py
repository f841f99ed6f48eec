"""Port interface for fetching a provider response body."""

from abc import ABC, abstractmethod
from collections.abc import Mapping


class FetcherPort(ABC):
    @abstractmethod
    def fetch(
        self,
        url: str,
        params: Mapping[str, str | int] | None = None,
        headers: Mapping[str, str] | None = None,
        auth: tuple[str, str] | None = None,
    ) -> str:
        """Issue one GET request and return the response body.

        ``auth`` is a (username, password) pair sent as HTTP Basic auth.

        Raises:
            ProviderError: on transport failure, an invalid URL or a non-2xx status.
        """
        ...
