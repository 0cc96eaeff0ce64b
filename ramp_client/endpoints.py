"""Registered API endpoints."""

from enum import StrEnum
from itertools import permutations


class Endpoint(StrEnum):
    """Endpoints exposed by the expenses API."""

    EMPLOYEES = "employees"
    PAGINATED_TRANSACTIONS = "paginatedTransactions"
    TRANSACTIONS_BY_EMPLOYEE = "transactionsByEmployee"
    SET_TRANSACTION_APPROVAL = "setTransactionApproval"


# Endpoint segments whose cached payloads only ever hold employee records
EMPLOYEE_ENDPOINTS = frozenset({"employee", Endpoint.EMPLOYEES.value})


def overlapping_endpoints(endpoints=None) -> list[tuple[str, str]]:
    """Pairs (a, b) where endpoint a is a literal prefix of endpoint b.

    Prefix invalidation matches keys with ``str.startswith``, so any pair
    returned here means clearing ``a`` also clears every entry of ``b``.
    """
    names = [str(e) for e in (endpoints if endpoints is not None else Endpoint)]
    return [(a, b) for a, b in permutations(names, 2) if b.startswith(a)]
