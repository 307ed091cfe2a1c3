from __future__ import annotations

from datetime import date, datetime
from typing import Literal

from pydantic import Field

from lobmail.models.addresses import Address
from lobmail.models.common import (
    CustomEnvelope,
    ExtraService,
    LetterAddressPlacement,
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


class Letter(ResponseModel):
    id: str
    description: str | None = None
    metadata: Metadata = Field(default_factory=dict)
    to: Address
    from_: Address | None = Field(default=None, alias="from")
    color: bool
    double_sided: bool
    address_placement: LetterAddressPlacement
    return_envelope: bool
    perforated_page: int | None = None
    custom_envelope: CustomEnvelope | None = None
    extra_service: ExtraService | None = None
    mail_type: MailType
    url: str
    merge_variables: dict[str, str] | None = None
    template_id: str | None = None
    template_version_id: str | None = None
    carrier: str
    tracking_number: str | None = None
    tracking_events: list[TrackingEvent] = Field(default_factory=list)
    thumbnails: list[Thumbnails] = Field(default_factory=list)
    expected_delivery_date: date
    date_created: datetime
    date_modified: datetime
    send_date: datetime
    deleted: bool | None = None
    object: Literal["letter"]


class NewLetter(RequestModel):
    description: str | None = None
    to: SendAddress
    from_: SendAddress = Field(alias="from")
    color: bool
    file: FileInput
    merge_variables: dict[str, str] | None = None
    double_sided: bool | None = None
    address_placement: LetterAddressPlacement | None = None
    return_envelope: bool | None = None
    perforated_page: int | None = Field(default=None, ge=1)
    custom_envelope: str | None = None
    mail_type: MailType | None = None
    extra_service: ExtraService | None = None
    send_date: datetime | None = None
    metadata: Metadata | None = None


class ListLettersOptions(MailListOptions):
    color: bool | None = None
