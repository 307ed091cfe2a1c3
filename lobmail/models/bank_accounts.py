from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import Field

from lobmail.models.common import AccountType, ListOptions, Metadata, RequestModel, ResponseModel


class BankAccount(ResponseModel):
    id: str
    description: str | None = None
    metadata: Metadata = Field(default_factory=dict)
    routing_number: str
    account_number: str
    account_type: AccountType
    signatory: str
    signature_url: str | None = None
    bank_name: str
    verified: bool
    date_created: datetime
    date_modified: datetime
    deleted: bool | None = None
    object: Literal["bank_account"]


class NewBankAccount(RequestModel):
    description: str | None = None
    routing_number: str = Field(min_length=9, max_length=9)
    account_number: str
    account_type: AccountType
    signatory: str
    metadata: Metadata | None = None


class BankAccountVerification(RequestModel):
    # Micro-deposit amounts, in cents.
    amounts: tuple[int, int]


class ListBankAccountsOptions(ListOptions):
    pass
