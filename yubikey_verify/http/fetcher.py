"""
HTTP Fetcher
============
The transport capability the verification client depends on, and the
default httpx implementation of it.
"""

from typing import Optional, Protocol, runtime_checkable
import httpx
import structlog
from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from ..exceptions import TransportError, TransportTimeoutError

logger = structlog.get_logger(__name__)

USER_AGENT = "yubikey-verify"


class Response(Protocol):
    """Anything exposing the response body as text."""
    text: str


@runtime_checkable
class HttpFetcher(Protocol):
    """Issues a GET request and returns the response."""

    async def get(self, url: str) -> Response:
        ...


def _is_retryable(exc: BaseException) -> bool:
    """Timeouts, connection failures and 5xx responses are worth another attempt."""
    if isinstance(exc, TransportTimeoutError):
        return True
    if isinstance(exc, TransportError):
        return exc.status_code is None or exc.status_code >= 500
    return False


def _log_retry(retry_state: RetryCallState) -> None:
    exc = retry_state.outcome.exception() if retry_state.outcome else None
    logger.warning(
        "Retrying validation request",
        attempt=retry_state.attempt_number,
        error=str(exc),
    )


class HttpxFetcher:
    """
    Async httpx fetcher for the validation service.

    Features:
    - Bounded request time (``timeout`` seconds).
    - httpx errors and non-2xx responses mapped to ``TransportError``.
    - Optional retries on transport failures (``retries`` attempts in total).
    """

    def __init__(
        self,
        timeout: float = 10.0,
        retries: int = 1,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.timeout = timeout
        self.retries = max(1, retries)
        self._owns_client = client is None
        self._client = client

    async def __aenter__(self):
        self._get_client()
        return self

    async def __aexit__(self, *args):
        await self.aclose()

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self.timeout,
                headers={"User-Agent": USER_AGENT},
            )
        return self._client

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this fetcher created it."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    def _map_exception(self, exc: httpx.HTTPError, url: str) -> TransportError:
        """Map httpx exceptions to transport errors."""
        endpoint = url.split("?", 1)[0]
        if isinstance(exc, httpx.TimeoutException):
            return TransportTimeoutError("Request timed out", endpoint=endpoint)
        if isinstance(exc, httpx.HTTPStatusError):
            status = exc.response.status_code
            return TransportError(
                f"HTTP {status} Error", endpoint=endpoint, status_code=status
            )
        return TransportError(f"Failed to connect: {exc}", endpoint=endpoint)

    async def _get_once(self, url: str) -> httpx.Response:
        try:
            response = await self._get_client().get(url)
            response.raise_for_status()
            return response
        except httpx.HTTPError as e:
            raise self._map_exception(e, url) from e

    async def get(self, url: str) -> httpx.Response:
        """Fetch ``url``, retrying transport failures when configured."""
        async for attempt in AsyncRetrying(
            retry=retry_if_exception(_is_retryable),
            stop=stop_after_attempt(self.retries),
            wait=wait_exponential(multiplier=0.5, min=0.5, max=5),
            before_sleep=_log_retry,
            reraise=True,
        ):
            with attempt:
                return await self._get_once(url)
