"""Shared fixtures for cache tests."""

import pytest

from app.cache import CacheStore
from app.services.fetcher import CachedFetcher
from ramp_client.base import RequestWrapper
from tests.fakes import FakeTransport

EMPLOYEES = [
    {"id": "e1", "firstName": "James", "lastName": "Smith"},
    {"id": "e2", "firstName": "Mary", "lastName": "Jones"},
]

TRANSACTIONS = [
    {"id": "t1", "amount": 12.5, "employee": EMPLOYEES[0], "merchant": "Cafe", "date": "2024-01-02", "approved": False},
    {"id": "t2", "amount": 99.0, "employee": EMPLOYEES[1], "merchant": "Books", "date": "2024-01-03", "approved": False},
]


@pytest.fixture
def store():
    return CacheStore()


@pytest.fixture
def transport():
    return FakeTransport(
        {
            "employees": EMPLOYEES,
            "paginatedTransactions": {"data": TRANSACTIONS, "nextPage": None},
            "transactionsByEmployee": lambda params: [
                t for t in TRANSACTIONS if t["employee"]["id"] == params.employee_id
            ],
            "setTransactionApproval": lambda params: {
                **next(t for t in TRANSACTIONS if t["id"] == params.transaction_id),
                "approved": params.value,
            },
            "transactions": [{"id": "t1", "approved": False}],
        }
    )


@pytest.fixture
def errors():
    return []


@pytest.fixture
def fetcher(store, transport, errors):
    return CachedFetcher(store, transport, RequestWrapper(on_error=errors.append))
