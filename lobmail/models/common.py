from __future__ import annotations

from datetime import date, datetime
from typing import Generic, Literal, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator


Metadata = dict[str, str]

MailType = Literal["usps_first_class", "usps_standard", "ups_next_day_air"]
PostcardSize = Literal["4x6", "6x9", "6x11"]
LetterAddressPlacement = Literal["top_first_page", "insert_blank_page"]
ExtraService = Literal["certified", "certified_return_receipt", "registered"]
AccountType = Literal["company", "individual"]
Order = Literal["asc", "desc"]
ListInclude = Literal["total_count"]

T = TypeVar("T")


class RequestModel(BaseModel):
    """Base for everything the caller sends; unknown fields are a mistake."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)


class ResponseModel(BaseModel):
    """Base for everything Lob sends back."""

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)


class Deleted(ResponseModel):
    id: str
    deleted: bool


class Thumbnails(ResponseModel):
    large: str
    medium: str
    small: str


class TrackingEvent(ResponseModel):
    id: str
    name: str
    location: str | None = None
    time: datetime
    date_created: datetime
    date_modified: datetime
    object: Literal["tracking_event"]


class CustomEnvelope(ResponseModel):
    id: str
    url: str
    object: Literal["envelope"]


class ListResponse(ResponseModel, Generic[T]):
    data: list[T]
    object: Literal["list"]
    next_url: str | None = None
    previous_url: str | None = None
    count: int | None = None
    # Only present when the request asked for include[]=total_count.
    total_count: int | None = None


class LobErrorPayload(ResponseModel):
    message: str
    status_code: int | None = None


class LobErrorResponse(ResponseModel):
    error: LobErrorPayload


class DateFilter(RequestModel):
    """ISO-8601 bounds, e.g. ``DateFilter(gt=date(2012, 1, 1))``."""

    gt: datetime | date | None = None
    gte: datetime | date | None = None
    lt: datetime | date | None = None
    lte: datetime | date | None = None


class SortBy(RequestModel):
    date_created: Order | None = None
    send_date: Order | None = None

    @model_validator(mode="after")
    def _exactly_one_key(self) -> SortBy:
        if (self.date_created is None) == (self.send_date is None):
            raise ValueError("sort_by accepts exactly one of date_created or send_date")
        return self


class ListOptions(RequestModel):
    limit: int | None = Field(default=None, ge=1, le=100)
    before: str | None = None
    after: str | None = None
    include: list[ListInclude] | None = None
    metadata: Metadata | None = None
    date_created: DateFilter | None = None


class MailListOptions(ListOptions):
    """Filters shared by postcards, letters and checks."""

    mail_type: MailType | None = None
    # True: only orders whose send_date is after date_created.
    scheduled: bool | None = None
    send_date: DateFilter | None = None
    sort_by: SortBy | None = None


class SendAddressComponents(RequestModel):
    name: str
    address_line1: str
    address_line2: str | None = None
    address_city: str
    address_state: str
    address_zip: str
    address_country: str | None = None
    company: str | None = None


# An existing address id ("adr_...") or inline components; no wire tag.
SendAddress = Union[str, SendAddressComponents]
