"""Expenses API client package."""

from ramp_client.base import BaseClient, RequestWrapper
from ramp_client.endpoints import EMPLOYEE_ENDPOINTS, Endpoint, overlapping_endpoints
from ramp_client.schemas import (
    EmployeeSchema,
    PaginatedRequestParams,
    PaginatedTransactionsSchema,
    RequestByEmployeeParams,
    SetTransactionApprovalParams,
    TransactionSchema,
    dump_params,
)

__all__ = [
    # Transport
    "BaseClient",
    "RequestWrapper",
    # Endpoints
    "Endpoint",
    "EMPLOYEE_ENDPOINTS",
    "overlapping_endpoints",
    # Schemas
    "EmployeeSchema",
    "TransactionSchema",
    "PaginatedTransactionsSchema",
    "PaginatedRequestParams",
    "RequestByEmployeeParams",
    "SetTransactionApprovalParams",
    "dump_params",
]
