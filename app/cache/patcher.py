"""In-place approval updates of cached transaction payloads."""

from typing import Any

from loguru import logger

from app.cache.codec import decode, encode
from app.cache.errors import CacheError
from app.cache.store import CacheStore, EntryKind
from settings import EMPLOYEE_CACHE_KEY


def _set_approval(transactions: list, transaction_id: str, value: bool) -> tuple[list, bool]:
    """Copy of ``transactions`` with the target's approval replaced."""
    found = False
    updated = []
    for txn in transactions:
        if isinstance(txn, dict) and txn.get("id") == transaction_id:
            updated.append({**txn, "approved": value})
            found = True
        else:
            updated.append(txn)
    return updated, found


class TransactionCachePatcher:
    """Rewrites the approval flag of one transaction across all cached views.

    Flat transaction lists and paginated containers are patched in place so
    both views stay consistent without wiping the cache. Employee entries and
    opaque payloads are never inspected.
    """

    def __init__(self, store: CacheStore, employee_key: str = EMPLOYEE_CACHE_KEY):
        self._store = store
        self._employee_key = employee_key

    def _patch(self, kind: EntryKind, value: Any, transaction_id: str, new_value: bool) -> Any | None:
        """Patched value, or None when the entry has nothing to change."""
        if kind == EntryKind.TRANSACTIONS:
            if not isinstance(value, list):
                raise CacheError(f"expected a list, got {type(value).__name__}")
            updated, found = _set_approval(value, transaction_id, new_value)
            return updated if found else None

        if not isinstance(value, dict) or not isinstance(value.get("data"), list):
            raise CacheError("expected an object with a data list")
        updated, found = _set_approval(value["data"], transaction_id, new_value)
        return {**value, "data": updated} if found else None

    def update_cache_by_transaction_id(self, transaction_id: str, new_value: bool) -> int:
        """Set ``approved`` on every cached copy of a transaction.

        Returns the number of entries rewritten. A bad entry is logged and
        skipped without stopping the rest.
        """
        patched = 0
        for key, entry in self._store.items():
            if key == self._employee_key:
                continue
            if entry.kind not in (EntryKind.TRANSACTIONS, EntryKind.PAGINATED_TRANSACTIONS):
                continue

            try:
                updated = self._patch(entry.kind, decode(entry.payload), transaction_id, new_value)
                if updated is None:
                    continue
                self._store.put(key, encode(updated), kind=entry.kind)
            except CacheError as e:
                logger.warning("Skipped cache entry {}: {}", key, e.message)
                continue
            patched += 1

        logger.debug("Transaction {} approved={}: {} entries patched", transaction_id, new_value, patched)
        return patched
