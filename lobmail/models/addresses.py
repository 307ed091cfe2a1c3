from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import Field

from lobmail.models.common import ListOptions, Metadata, RequestModel, ResponseModel


class Address(ResponseModel):
    id: str
    description: str | None = None
    name: str | None = None
    company: str | None = None
    phone: str | None = None
    email: str | None = None
    address_line1: str
    address_line2: str | None = None
    address_city: str | None = None
    address_state: str | None = None
    address_zip: str | None = None
    address_country: str | None = None
    metadata: Metadata = Field(default_factory=dict)
    date_created: datetime
    date_modified: datetime
    deleted: bool | None = None
    object: Literal["address"]


class NewAddress(RequestModel):
    description: str | None = None
    name: str | None = None
    company: str | None = None
    phone: str | None = None
    email: str | None = None
    address_line1: str
    address_line2: str | None = None
    address_city: str | None = None
    address_state: str | None = None
    address_zip: str | None = None
    address_country: str | None = None
    metadata: Metadata | None = None


class ListAddressesOptions(ListOptions):
    pass
