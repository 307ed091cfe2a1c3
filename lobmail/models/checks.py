from __future__ import annotations

from datetime import date, datetime
from typing import Literal

from pydantic import Field

from lobmail.domain.errors import LobBadRequest
from lobmail.domain.money import Money
from lobmail.models.addresses import Address
from lobmail.models.bank_accounts import BankAccount
from lobmail.models.common import (
    MailListOptions,
    MailType,
    Metadata,
    RequestModel,
    ResponseModel,
    SendAddress,
    Thumbnails,
    TrackingEvent,
)
from lobmail.models.files import FileInput


class Check(ResponseModel):
    id: str
    description: str | None = None
    metadata: Metadata = Field(default_factory=dict)
    check_number: int
    memo: str | None = None
    amount: Money
    message: str | None = None
    url: str
    check_bottom_template_id: str | None = None
    attachment_template_id: str | None = None
    check_bottom_template_version_id: str | None = None
    attachment_template_version_id: str | None = None
    to: Address
    from_: Address = Field(alias="from")
    bank_account: BankAccount
    carrier: str
    tracking_number: str | None = None
    tracking_events: list[TrackingEvent] = Field(default_factory=list)
    thumbnails: list[Thumbnails] = Field(default_factory=list)
    merge_variables: dict[str, str] | None = None
    expected_delivery_date: date
    mail_type: MailType
    date_created: datetime
    date_modified: datetime
    send_date: datetime
    deleted: bool | None = None
    object: Literal["check"]


class NewCheck(RequestModel):
    description: str | None = None
    to: SendAddress
    from_: SendAddress = Field(alias="from")
    bank_account: str
    amount: Money
    memo: str | None = Field(default=None, max_length=40)
    check_number: int | None = None
    logo: FileInput | None = None
    # Either message or check_bottom, never both.
    message: str | None = Field(default=None, max_length=400)
    check_bottom: FileInput | None = None
    attachment: FileInput | None = None
    # usps_first_class or ups_next_day_air
    mail_type: MailType | None = None
    send_date: date | None = None
    merge_variables: dict[str, str] | None = None
    metadata: Metadata | None = None

    def validate_for_create(self) -> None:
        """Reject combinations Lob would refuse, before anything is sent."""
        if self.logo is not None and not (self.logo.is_file() or self.logo.is_url()):
            raise LobBadRequest("check logo must be a local file or a URL")
        if (self.message is None) == (self.check_bottom is None):
            raise LobBadRequest("exactly one of message or check_bottom must be provided")


class ListChecksOptions(MailListOptions):
    pass
