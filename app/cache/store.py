"""In-memory cache store with tagged entries."""

from collections.abc import Iterator
from dataclasses import dataclass
from enum import StrEnum

from loguru import logger

from app.cache.codec import decode
from app.cache.errors import CacheDecodeError
from app.cache.keys import key_endpoint
from ramp_client.endpoints import EMPLOYEE_ENDPOINTS, Endpoint


class EntryKind(StrEnum):
    """Payload shape of a cache entry, fixed when the entry is written."""

    EMPLOYEES = "employees"
    TRANSACTIONS = "transactions"
    PAGINATED_TRANSACTIONS = "paginated_transactions"
    OPAQUE = "opaque"


ENDPOINT_KINDS = {
    Endpoint.EMPLOYEES: EntryKind.EMPLOYEES,
    Endpoint.TRANSACTIONS_BY_EMPLOYEE: EntryKind.TRANSACTIONS,
    Endpoint.PAGINATED_TRANSACTIONS: EntryKind.PAGINATED_TRANSACTIONS,
}


@dataclass(frozen=True)
class CacheEntry:
    """Serialized payload plus its shape tag."""

    kind: EntryKind
    payload: str


def kind_for_endpoint(endpoint: str) -> EntryKind | None:
    """Tag for payloads returned by a registered endpoint, None if unknown."""
    try:
        return ENDPOINT_KINDS.get(Endpoint(endpoint))
    except ValueError:
        return None


def infer_kind(key: str, payload: str) -> EntryKind:
    """Tag a raw payload by its key and decoded shape."""
    if key_endpoint(key) in EMPLOYEE_ENDPOINTS:
        return EntryKind.EMPLOYEES

    try:
        value = decode(payload)
    except CacheDecodeError as e:
        logger.warning("Cache entry {} stored as opaque: {}", key, e.message)
        return EntryKind.OPAQUE

    if isinstance(value, list):
        return EntryKind.TRANSACTIONS
    if isinstance(value, dict) and isinstance(value.get("data"), list):
        return EntryKind.PAGINATED_TRANSACTIONS
    return EntryKind.OPAQUE


class CacheStore:
    """Key -> tagged JSON payload mapping that may be absent.

    While absent (not initialized, or detached) reads miss and writes are
    dropped; nothing raises.
    """

    def __init__(self, initialized: bool = True):
        self._entries: dict[str, CacheEntry] | None = {} if initialized else None

    @property
    def initialized(self) -> bool:
        return self._entries is not None

    def init(self) -> None:
        """Attach an empty mapping if the store is absent."""
        if self._entries is None:
            self._entries = {}
            logger.debug("Cache store initialized")

    def detach(self) -> None:
        """Drop the mapping, making the store absent."""
        self._entries = None
        logger.debug("Cache store detached")

    def reset(self) -> None:
        """Replace the mapping with a fresh empty one."""
        if self._entries is None:
            return
        count = len(self._entries)
        self._entries = {}
        logger.info("Cache cleared ({} entries)", count)

    def get(self, key: str) -> CacheEntry | None:
        if self._entries is None:
            return None
        return self._entries.get(key)

    def put(self, key: str, payload: str, kind: EntryKind | None = None) -> None:
        """Store a payload, inferring its tag when none is given."""
        if self._entries is None:
            logger.debug("Cache store absent, dropped write: {}", key)
            return
        if kind is None:
            kind = infer_kind(key, payload)
        self._entries[key] = CacheEntry(kind=kind, payload=payload)

    def delete(self, key: str) -> bool:
        if self._entries is None:
            return False
        return self._entries.pop(key, None) is not None

    def keys(self) -> list[str]:
        """Snapshot of current keys, safe to iterate while mutating."""
        if self._entries is None:
            return []
        return list(self._entries)

    def items(self) -> list[tuple[str, CacheEntry]]:
        if self._entries is None:
            return []
        return list(self._entries.items())

    def __getitem__(self, key: str) -> str:
        entry = self.get(key)
        if entry is None:
            raise KeyError(key)
        return entry.payload

    def __setitem__(self, key: str, payload: str) -> None:
        self.put(key, payload)

    def __contains__(self, key: object) -> bool:
        return self._entries is not None and key in self._entries

    def __len__(self) -> int:
        return len(self._entries) if self._entries is not None else 0

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())
