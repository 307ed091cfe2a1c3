"""Webhook events.

An event body carries no tag saying which resource it holds. Instead of
trying every shape in turn, the body type is picked from the resource
category named by the event type id (``postcard.created`` holds a postcard).
``event_type.resource`` may be omitted but must agree with the id when sent.
A body without an ``object`` key (what Lob sends for deletions) decodes as
:class:`Deleted`.
"""

from __future__ import annotations

import json
from datetime import datetime
from typing import Any, Literal, Union

from pydantic import ValidationError, model_validator

from lobmail.domain.errors import LobSerializationError
from lobmail.models.addresses import Address
from lobmail.models.bank_accounts import BankAccount
from lobmail.models.checks import Check
from lobmail.models.common import Deleted, ResponseModel
from lobmail.models.letters import Letter
from lobmail.models.postcards import Postcard


ResourceKind = Literal["postcards", "letters", "checks", "addresses", "bank_accounts"]

EventTypeId = Literal[
    "postcard.created",
    "postcard.rendered_pdf",
    "postcard.rendered_thumbnails",
    "postcard.deleted",
    "postcard.mailed",
    "postcard.in_transit",
    "postcard.in_local_area",
    "postcard.processed_for_delivery",
    "postcard.re-routed",
    "postcard.returned_to_sender",
    "letter.created",
    "letter.rendered_pdf",
    "letter.rendered_thumbnails",
    "letter.deleted",
    "letter.mailed",
    "letter.in_transit",
    "letter.in_local_area",
    "letter.processed_for_delivery",
    "letter.re-routed",
    "letter.returned_to_sender",
    "check.created",
    "check.rendered_pdf",
    "check.rendered_thumbnails",
    "check.deleted",
    "check.in_transit",
    "check.in_local_area",
    "check.processed_for_delivery",
    "check.re-routed",
    "check.returned_to_sender",
    "address.created",
    "address.deleted",
    "bank_account.created",
    "bank_account.deleted",
    "bank_account.verified",
]

EventBody = Union[Address, Postcard, Letter, Check, BankAccount, Deleted]

RESOURCE_BODY_TYPES: dict[str, type[ResponseModel]] = {
    "postcards": Postcard,
    "letters": Letter,
    "checks": Check,
    "addresses": Address,
    "bank_accounts": BankAccount,
}

# Event type ids are "<resource>.<action>" with the resource in singular form.
_ID_PREFIX_RESOURCE: dict[str, str] = {
    "postcard": "postcards",
    "letter": "letters",
    "check": "checks",
    "address": "addresses",
    "bank_account": "bank_accounts",
}


class EventType(ResponseModel):
    id: EventTypeId
    enabled_for_test: bool
    resource: ResourceKind
    object: Literal["event_type"]

    @model_validator(mode="before")
    @classmethod
    def _resource_from_id(cls, data: Any) -> Any:
        if not isinstance(data, dict) or not isinstance(data.get("id"), str):
            return data
        expected = _ID_PREFIX_RESOURCE.get(data["id"].split(".", 1)[0])
        if expected is None:
            return data
        resource = data.get("resource")
        if resource is None:
            return {**data, "resource": expected}
        if resource != expected:
            raise ValueError(f"event type {data['id']!r} belongs to {expected!r}, not {resource!r}")
        return data


class Event(ResponseModel):
    id: str
    body: EventBody
    reference_id: str
    event_type: EventType
    date_created: datetime
    object: Literal["event"]

    @model_validator(mode="wrap")
    @classmethod
    def _decode_body_by_resource(cls, data: Any, handler):
        if not isinstance(data, dict) or not isinstance(data.get("body"), dict):
            return handler(data)
        event_type = EventType.model_validate(data.get("event_type"))
        raw_body = data["body"]
        if "object" not in raw_body:
            body = Deleted.model_validate(raw_body)
        else:
            body = RESOURCE_BODY_TYPES[event_type.resource].model_validate(raw_body)
        return handler({**data, "body": body, "event_type": event_type})


def parse_event(payload: dict[str, Any] | str | bytes) -> Event:
    """Decode a webhook delivery, from either parsed JSON or the raw request body."""
    try:
        if isinstance(payload, (str, bytes)):
            payload = json.loads(payload)
        return Event.model_validate(payload)
    except (ValueError, ValidationError) as exc:
        raise LobSerializationError(f"Unable to decode Lob event: {exc}") from exc
