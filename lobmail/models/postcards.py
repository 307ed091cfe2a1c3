from __future__ import annotations

from datetime import date, datetime
from typing import Literal

from pydantic import Field

from lobmail.models.addresses import Address
from lobmail.models.common import (
    MailListOptions,
    MailType,
    Metadata,
    PostcardSize,
    RequestModel,
    ResponseModel,
    SendAddress,
    Thumbnails,
    TrackingEvent,
)
from lobmail.models.files import FileInput


class Postcard(ResponseModel):
    id: str
    description: str | None = None
    metadata: Metadata = Field(default_factory=dict)
    to: Address
    from_: Address | None = Field(default=None, alias="from")
    url: str
    front_template_id: str | None = None
    back_template_id: str | None = None
    front_template_version_id: str | None = None
    back_template_version_id: str | None = None
    carrier: str
    tracking_events: list[TrackingEvent] = Field(default_factory=list)
    thumbnails: list[Thumbnails] = Field(default_factory=list)
    merge_variables: dict[str, str] | None = None
    size: PostcardSize
    mail_type: MailType
    expected_delivery_date: date
    date_created: datetime
    date_modified: datetime
    send_date: datetime
    deleted: bool | None = None
    object: Literal["postcard"]


class NewPostcard(RequestModel):
    description: str | None = None
    to: SendAddress
    from_: SendAddress | None = Field(default=None, alias="from")
    front: FileInput
    back: FileInput
    merge_variables: dict[str, str] | None = None
    size: PostcardSize | None = None
    mail_type: MailType | None = None
    send_date: datetime | None = None
    metadata: Metadata | None = None


class ListPostcardsOptions(MailListOptions):
    size: list[PostcardSize] | None = None
