"""Expenses API schemas - employees, transactions, request params."""

from pydantic import BaseModel, Field


class EmployeeSchema(BaseModel):
    """Employee who owns card transactions."""

    id: str
    first_name: str = Field(alias="firstName")
    last_name: str = Field(alias="lastName")

    class Config:
        populate_by_name = True


class TransactionSchema(BaseModel):
    """Card transaction awaiting approval."""

    id: str
    amount: float = 0.0
    employee: EmployeeSchema | None = None
    merchant: str = ""
    date: str = ""
    approved: bool = False


class PaginatedTransactionsSchema(BaseModel):
    """One page of transactions plus the cursor of the next page."""

    data: list[TransactionSchema] = []
    next_page: int | None = Field(alias="nextPage", default=None)

    class Config:
        populate_by_name = True


class PaginatedRequestParams(BaseModel):
    """Params for paginatedTransactions."""

    page: int | None = None


class RequestByEmployeeParams(BaseModel):
    """Params for transactionsByEmployee."""

    employee_id: str = Field(alias="employeeId")

    class Config:
        populate_by_name = True


class SetTransactionApprovalParams(BaseModel):
    """Params for setTransactionApproval."""

    transaction_id: str = Field(alias="transactionId")
    value: bool

    class Config:
        populate_by_name = True


def dump_params(params):
    """Plain JSON-ready form of request params (models are dumped by alias)."""
    if isinstance(params, BaseModel):
        return params.model_dump(mode="json", by_alias=True)
    return params
