"""Transaction service - typed reads and approval updates."""

from loguru import logger
from pydantic import ValidationError

from app.services.fetcher import CachedFetcher
from ramp_client.endpoints import Endpoint
from ramp_client.schemas import (
    EmployeeSchema,
    PaginatedRequestParams,
    PaginatedTransactionsSchema,
    RequestByEmployeeParams,
    SetTransactionApprovalParams,
    TransactionSchema,
)


class TransactionService:
    """Employees and transactions for the approvals view."""

    def __init__(self, fetcher: CachedFetcher):
        self._fetcher = fetcher

    async def employees(self) -> list[EmployeeSchema] | None:
        data = await self._fetcher.fetch_with_cache(Endpoint.EMPLOYEES)
        if data is None:
            return None
        return [EmployeeSchema.model_validate(e) for e in data]

    async def paginated_transactions(self, page: int | None = None) -> PaginatedTransactionsSchema | None:
        """One page of all transactions (first page when ``page`` is None)."""
        data = await self._fetcher.fetch_with_cache(
            Endpoint.PAGINATED_TRANSACTIONS,
            PaginatedRequestParams(page=page),
        )
        if data is None:
            return None
        return PaginatedTransactionsSchema.model_validate(data)

    async def transactions_by_employee(self, employee_id: str) -> list[TransactionSchema] | None:
        data = await self._fetcher.fetch_with_cache(
            Endpoint.TRANSACTIONS_BY_EMPLOYEE,
            RequestByEmployeeParams(employee_id=employee_id),
        )
        if data is None:
            return None
        return [TransactionSchema.model_validate(t) for t in data]

    async def set_transaction_approval(self, transaction_id: str, value: bool) -> TransactionSchema | None:
        """Persist an approval change, then patch every cached copy.

        The API answers with the updated transaction; on failure the result is
        None and the cache is left alone.
        """
        params = SetTransactionApprovalParams(transaction_id=transaction_id, value=value)
        result = await self._fetcher.fetch_without_cache(Endpoint.SET_TRANSACTION_APPROVAL, params)
        if result is None:
            return None

        try:
            transaction = TransactionSchema.model_validate(result)
        except ValidationError as e:
            logger.warning("Unexpected approval response for {}: {}", transaction_id, e)
            transaction = TransactionSchema(id=transaction_id, approved=value)

        patched = self._fetcher.update_cache_by_transaction_id(transaction_id, value)
        logger.info("Transaction {} approved={} ({} cache entries patched)", transaction_id, value, patched)
        return transaction
