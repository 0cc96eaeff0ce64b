"""Base HTTP client with retry logic, and the request wrapper."""

import asyncio
from collections.abc import Awaitable, Callable
from typing import Any

import httpx
from loguru import logger
from tenacity import (
    retry,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from ramp_client.schemas import dump_params
from settings import API_BASE_URL, API_TIMEOUT, MAX_CONCURRENT, REQUEST_DELAY


def _is_retryable_error(exc: BaseException) -> bool:
    """Check if exception is retryable (network errors + 5xx server errors)."""
    if isinstance(exc, (httpx.ReadError, httpx.ConnectError, httpx.TimeoutException)):
        return True
    return isinstance(exc, httpx.HTTPStatusError) and exc.response.status_code >= 500


class BaseClient:
    """Async HTTP transport with rate limiting and exponential backoff."""

    def __init__(
        self,
        base_url: str = API_BASE_URL,
        timeout: float = API_TIMEOUT,
        max_concurrent: int = MAX_CONCURRENT,
        request_delay: float = REQUEST_DELAY,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport
        self._delay = request_delay
        self._client: httpx.AsyncClient | None = None
        self._sem = asyncio.Semaphore(max_concurrent)
        self._request_count = 0
        logger.info("{}: base_url={}, max_concurrent={}", self.__class__.__name__, self._base_url, max_concurrent)

    @property
    def request_count(self) -> int:
        return self._request_count

    async def __aenter__(self):
        self._ensure_client()
        return self

    async def __aexit__(self, *_):
        await self.aclose()

    def _ensure_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self._timeout,
                transport=self._transport,
                limits=httpx.Limits(max_connections=100, max_keepalive_connections=20),
            )
        return self._client

    async def aclose(self) -> None:
        logger.info("Total API requests: {}", self._request_count)
        if self._client:
            await self._client.aclose()
            self._client = None

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=1, max=30),
        retry=retry_if_exception(_is_retryable_error),
        reraise=True,
    )
    async def _post(self, path: str, payload: Any = None) -> Any:
        """POST request with retry logic."""
        client = self._ensure_client()
        async with self._sem:
            if self._delay:
                await asyncio.sleep(self._delay)
            self._request_count += 1
            resp = await client.post(f"{self._base_url}/{path}", json=payload)
            resp.raise_for_status()
            if not resp.content:
                return None
            return resp.json()

    async def fetch(self, endpoint: str, params: Any = None) -> Any:
        """Call an endpoint with optional params, return the decoded JSON body."""
        logger.debug("Fetch {} params={}", endpoint, params)
        return await self._post(str(endpoint), dump_params(params))


class RequestWrapper:
    """Runs requests, tracks in-flight state and turns failures into None."""

    def __init__(self, on_error: Callable[[Exception], None] | None = None):
        self._on_error = on_error
        self._in_flight = 0

    @property
    def loading(self) -> bool:
        """True while at least one wrapped request is running."""
        return self._in_flight > 0

    async def wrapped_request(self, request: Callable[[], Awaitable[Any]]) -> Any:
        """Await ``request()``, return its result or None on failure."""
        self._in_flight += 1
        try:
            return await request()
        except Exception as e:
            logger.warning("Request failed: {}", e)
            if self._on_error is not None:
                self._on_error(e)
            return None
        finally:
            self._in_flight -= 1
