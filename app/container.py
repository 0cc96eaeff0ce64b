"""Dependency Injection container - initialized at app startup."""

from collections.abc import Callable

import httpx
from loguru import logger

from app.cache import CacheStore
from app.services.fetcher import CachedFetcher
from app.services.transactions import TransactionService
from ramp_client.base import BaseClient, RequestWrapper
from settings import API_BASE_URL
from settings.logging import setup_logging


class Container:
    """Application DI container - holds all singleton instances."""

    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def init(
        self,
        base_url: str = API_BASE_URL,
        on_error: Callable[[Exception], None] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        log_level: str | None = None,
    ) -> None:
        """Initialize all dependencies. Call once at app startup."""
        if self._initialized:
            return

        if log_level:
            setup_logging(level=log_level)

        # Shared state
        self.store = CacheStore()
        self._client = BaseClient(base_url=base_url, transport=transport)
        self._wrapper = RequestWrapper(on_error=on_error)

        # Services (with injected store and transport)
        self.fetcher = CachedFetcher(
            store=self.store,
            transport=self._client,
            wrapper=self._wrapper,
        )
        self.transactions = TransactionService(fetcher=self.fetcher)

        self._initialized = True
        logger.info("Container initialized")

    async def aclose(self) -> None:
        """Release the transport and detach the store."""
        if not self._initialized:
            return
        await self._client.aclose()
        self.store.detach()
        self._initialized = False


# Global container instance
container = Container()
