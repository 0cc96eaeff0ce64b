"""Services package - service class exports."""

from app.services.fetcher import CachedFetcher
from app.services.transactions import TransactionService

__all__ = [
    "CachedFetcher",
    "TransactionService",
]
