from __future__ import annotations

import logging
import time
from collections.abc import Sequence
from functools import lru_cache
from typing import Any, TypeVar
from urllib.parse import quote

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from lobmail.config import Settings, get_settings
from lobmail.domain.codecs import encode_form, encode_query
from lobmail.domain.errors import (
    LobApiError,
    LobBadRequest,
    LobError,
    LobSerializationError,
    LobTransportError,
    error_detail,
)
from lobmail.models.addresses import Address, ListAddressesOptions, NewAddress
from lobmail.models.bank_accounts import (
    BankAccount,
    BankAccountVerification,
    ListBankAccountsOptions,
    NewBankAccount,
)
from lobmail.models.checks import Check, ListChecksOptions, NewCheck
from lobmail.models.common import Deleted, ListResponse, LobErrorResponse, RequestModel
from lobmail.models.files import FILE_INPUT_TYPES
from lobmail.models.letters import Letter, ListLettersOptions, NewLetter
from lobmail.models.postcards import ListPostcardsOptions, NewPostcard, Postcard
from lobmail.models.verifications import (
    AutocompleteAddressOptions,
    AutocompleteQuery,
    IntlVerification,
    IntlVerificationInput,
    UsAutocompletion,
    UsVerification,
    UsVerificationInput,
    UsZipLookup,
    VerifyAddressOptions,
)
from lobmail.observability import count_request, log_event


R = TypeVar("R")

_EP_ADDRESSES = "/addresses"
_EP_US_VERIFICATIONS = "/us_verifications"
_EP_INTL_VERIFICATIONS = "/intl_verifications"
_EP_US_AUTOCOMPLETIONS = "/us_autocompletions"
_EP_US_ZIP_LOOKUPS = "/us_zip_lookups"
_EP_POSTCARDS = "/postcards"
_EP_LETTERS = "/letters"
_EP_CHECKS = "/checks"
_EP_BANK_ACCOUNTS = "/bank_accounts"

Multipart = list[tuple[str, tuple[str, bytes, str]]]


@lru_cache(maxsize=None)
def _adapter(result_type: Any) -> TypeAdapter:
    return TypeAdapter(result_type)


def _build_basic_auth(api_key: str) -> tuple[str, str]:
    return (api_key, "")


def _resource_path(collection: str, resource_id: str, suffix: str = "") -> str:
    if not resource_id or not resource_id.strip():
        raise LobBadRequest(f"Missing resource id for {collection}")
    return f"{collection}/{quote(resource_id, safe='')}{suffix}"


def split_file_fields(model: RequestModel) -> tuple[dict[str, Any], Multipart]:
    """Dump a create request, moving every ``LocalFile`` field into multipart parts.

    Template ids, URLs and HTML stay in the body as plain strings under the
    same field name.
    """
    file_fields = {
        name: field
        for name, field in type(model).model_fields.items()
        if isinstance(getattr(model, name), FILE_INPUT_TYPES)
    }
    try:
        body = model.model_dump(mode="json", by_alias=True, exclude_none=True, exclude=set(file_fields))
    except PydanticSerializationError as exc:
        raise LobSerializationError(f"Unable to encode {type(model).__name__}: {exc}") from exc

    files: Multipart = []
    for name, field in file_fields.items():
        value = getattr(model, name)
        wire_name = field.alias or name
        if value.is_file():
            files.append((wire_name, value.multipart_part()))
        else:
            body[wire_name] = value.wire_value()
    return body, files


def _form_fields(body: dict[str, Any]) -> dict[str, str | list[str]]:
    fields: dict[str, str | list[str]] = {}
    repeated: dict[str, list[str]] = {}
    for key, value in encode_form(body):
        if key.endswith("[]"):
            repeated.setdefault(key, []).append(value)
        else:
            fields[key] = value
    fields.update(repeated)
    return fields


def _raise_api_error(response: httpx.Response) -> None:
    try:
        payload = LobErrorResponse.model_validate(response.json())
    except (ValueError, ValidationError) as exc:
        raise LobSerializationError(
            f"Unable to parse Lob error payload (HTTP {response.status_code}): {response.text[:200]}"
        ) from exc
    raise LobApiError(payload.error.message, payload.error.status_code or response.status_code)


class LobClient:
    """Async client for the Lob print & mail API.

    One instance holds the API key and a reusable ``httpx.AsyncClient`` and can
    be shared between tasks. Nothing is cached and nothing is retried; inspect
    ``LobError.retryable`` to decide whether to try again.

        async with LobClient("test_...") as lob:
            address = await lob.get_address("adr_123")
    """

    def __init__(
        self,
        api_key: str | None = None,
        *,
        settings: Settings | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._settings = settings or get_settings()
        api_key = api_key or self._settings.lob_api_key
        if not api_key:
            raise LobBadRequest("Missing Lob API key")
        self._api_key = api_key
        self._base_url = self._settings.lob_api_base.rstrip("/")
        self._headers = {
            "Accept": "application/json",
            "Lob-Version": self._settings.lob_api_version,
        }
        self._owns_http_client = http_client is None
        self._http = http_client or httpx.AsyncClient(timeout=self._settings.lob_timeout_seconds)

    async def __aenter__(self) -> LobClient:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_http_client:
            await self._http.aclose()

    async def _request(
        self,
        *,
        operation: str,
        method: str,
        path: str,
        result_type: type[R] | Any,
        params: Sequence[tuple[str, str]] | None = None,
        json_payload: dict[str, Any] | None = None,
        form: dict[str, Any] | None = None,
        files: Multipart | None = None,
        headers: dict[str, str] | None = None,
    ) -> R:
        request_headers = dict(self._headers)
        request_headers.update(headers or {})
        started = time.perf_counter()
        try:
            try:
                response = await self._http.request(
                    method,
                    f"{self._base_url}{path}",
                    auth=_build_basic_auth(self._api_key),
                    headers=request_headers,
                    params=list(params) if params else None,
                    json=json_payload,
                    data=_form_fields(form) if form is not None else None,
                    files=files or None,
                )
            except httpx.HTTPError as exc:
                status_code = exc.response.status_code if isinstance(exc, httpx.HTTPStatusError) else None
                raise LobTransportError(str(exc) or type(exc).__name__, status_code) from exc

            log_event(
                "lob_request_completed",
                operation=operation,
                method=method,
                path=path,
                status_code=response.status_code,
                elapsed_ms=round((time.perf_counter() - started) * 1000, 1),
            )
            if not response.is_success:
                _raise_api_error(response)

            try:
                result = _adapter(result_type).validate_python(response.json())
            except (ValueError, ValidationError) as exc:
                raise LobSerializationError(f"Unexpected Lob {operation} response: {exc}") from exc
        except LobError as exc:
            count_request(operation, exc.kind)
            log_event("lob_request_failed", level=logging.WARNING, **error_detail(operation=operation, exc=exc))
            raise

        count_request(operation, "success")
        return result

    async def _create(self, operation: str, path: str, model: RequestModel, result_type: type[R]) -> R:
        body, files = split_file_fields(model)
        if files:
            return await self._request(
                operation=operation, method="POST", path=path, result_type=result_type, form=body, files=files
            )
        return await self._request(
            operation=operation, method="POST", path=path, result_type=result_type, json_payload=body
        )

    async def _list(self, operation: str, path: str, options: BaseModel | None, item_type: type[R]) -> ListResponse[R]:
        return await self._request(
            operation=operation,
            method="GET",
            path=path,
            result_type=ListResponse[item_type],
            params=encode_query(options),
        )

    # Addresses

    async def create_address(self, address: NewAddress) -> Address:
        return await self._create("create_address", _EP_ADDRESSES, address, Address)

    async def get_address(self, address_id: str) -> Address:
        path = _resource_path(_EP_ADDRESSES, address_id)
        return await self._request(operation="get_address", method="GET", path=path, result_type=Address)

    async def delete_address(self, address_id: str) -> Deleted:
        path = _resource_path(_EP_ADDRESSES, address_id)
        return await self._request(operation="delete_address", method="DELETE", path=path, result_type=Deleted)

    async def list_addresses(self, options: ListAddressesOptions | None = None) -> ListResponse[Address]:
        return await self._list("list_addresses", _EP_ADDRESSES, options, Address)

    # Verification

    async def verify_us_address(
        self,
        address: str | UsVerificationInput,
        options: VerifyAddressOptions | None = None,
    ) -> UsVerification:
        if isinstance(address, str):
            body: dict[str, Any] = {"address": address}
        else:
            body = address.model_dump(mode="json", exclude_none=True)
        return await self._request(
            operation="verify_us_address",
            method="POST",
            path=_EP_US_VERIFICATIONS,
            result_type=UsVerification,
            params=encode_query(options),
            json_payload=body,
        )

    async def verify_intl_address(self, address: IntlVerificationInput) -> IntlVerification:
        return await self._request(
            operation="verify_intl_address",
            method="POST",
            path=_EP_INTL_VERIFICATIONS,
            result_type=IntlVerification,
            json_payload=address.model_dump(mode="json", exclude_none=True),
        )

    async def autocomplete_address(
        self,
        address_prefix: str,
        options: AutocompleteAddressOptions | None = None,
    ) -> UsAutocompletion:
        headers: dict[str, str] = {}
        if options is not None and options.geo_ip_sort is not None:
            # The IP only ever travels in this header.
            headers["X-Forwarded-For"] = str(options.geo_ip_sort)
        return await self._request(
            operation="autocomplete_address",
            method="POST",
            path=_EP_US_AUTOCOMPLETIONS,
            result_type=UsAutocompletion,
            params=encode_query(AutocompleteQuery.build(address_prefix, options)),
            headers=headers,
        )

    async def us_zip_lookup(self, zip_code: str) -> UsZipLookup:
        return await self._request(
            operation="us_zip_lookup",
            method="POST",
            path=_EP_US_ZIP_LOOKUPS,
            result_type=UsZipLookup,
            json_payload={"zip_code": zip_code},
        )

    # Postcards

    async def create_postcard(self, postcard: NewPostcard) -> Postcard:
        return await self._create("create_postcard", _EP_POSTCARDS, postcard, Postcard)

    async def get_postcard(self, postcard_id: str) -> Postcard:
        path = _resource_path(_EP_POSTCARDS, postcard_id)
        return await self._request(operation="get_postcard", method="GET", path=path, result_type=Postcard)

    async def cancel_postcard(self, postcard_id: str) -> Deleted:
        path = _resource_path(_EP_POSTCARDS, postcard_id)
        return await self._request(operation="cancel_postcard", method="DELETE", path=path, result_type=Deleted)

    async def list_postcards(self, options: ListPostcardsOptions | None = None) -> ListResponse[Postcard]:
        return await self._list("list_postcards", _EP_POSTCARDS, options, Postcard)

    # Letters

    async def create_letter(self, letter: NewLetter) -> Letter:
        return await self._create("create_letter", _EP_LETTERS, letter, Letter)

    async def get_letter(self, letter_id: str) -> Letter:
        path = _resource_path(_EP_LETTERS, letter_id)
        return await self._request(operation="get_letter", method="GET", path=path, result_type=Letter)

    async def cancel_letter(self, letter_id: str) -> Deleted:
        path = _resource_path(_EP_LETTERS, letter_id)
        return await self._request(operation="cancel_letter", method="DELETE", path=path, result_type=Deleted)

    async def list_letters(self, options: ListLettersOptions | None = None) -> ListResponse[Letter]:
        return await self._list("list_letters", _EP_LETTERS, options, Letter)

    # Checks

    async def create_check(self, check: NewCheck) -> Check:
        check.validate_for_create()
        return await self._create("create_check", _EP_CHECKS, check, Check)

    async def get_check(self, check_id: str) -> Check:
        path = _resource_path(_EP_CHECKS, check_id)
        return await self._request(operation="get_check", method="GET", path=path, result_type=Check)

    async def cancel_check(self, check_id: str) -> Deleted:
        path = _resource_path(_EP_CHECKS, check_id)
        return await self._request(operation="cancel_check", method="DELETE", path=path, result_type=Deleted)

    async def list_checks(self, options: ListChecksOptions | None = None) -> ListResponse[Check]:
        return await self._list("list_checks", _EP_CHECKS, options, Check)

    # Bank accounts

    async def create_bank_account(self, bank_account: NewBankAccount) -> BankAccount:
        return await self._create("create_bank_account", _EP_BANK_ACCOUNTS, bank_account, BankAccount)

    async def get_bank_account(self, bank_account_id: str) -> BankAccount:
        path = _resource_path(_EP_BANK_ACCOUNTS, bank_account_id)
        return await self._request(operation="get_bank_account", method="GET", path=path, result_type=BankAccount)

    async def delete_bank_account(self, bank_account_id: str) -> Deleted:
        path = _resource_path(_EP_BANK_ACCOUNTS, bank_account_id)
        return await self._request(
            operation="delete_bank_account", method="DELETE", path=path, result_type=Deleted
        )

    async def verify_bank_account(self, bank_account_id: str, amounts: Sequence[int]) -> BankAccount:
        path = _resource_path(_EP_BANK_ACCOUNTS, bank_account_id, "/verify")
        try:
            verification = BankAccountVerification(amounts=tuple(amounts))
        except ValidationError as exc:
            raise LobBadRequest(f"verify_bank_account expects two amounts in cents, got {list(amounts)!r}") from exc
        return await self._request(
            operation="verify_bank_account",
            method="POST",
            path=path,
            result_type=BankAccount,
            json_payload=verification.model_dump(mode="json"),
        )

    async def list_bank_accounts(self, options: ListBankAccountsOptions | None = None) -> ListResponse[BankAccount]:
        return await self._list("list_bank_accounts", _EP_BANK_ACCOUNTS, options, BankAccount)


LOB_IMPLEMENTED_ENDPOINT_REGISTRY: dict[str, list[dict[str, str]]] = {
    "create_address": [{"method": "POST", "path": _EP_ADDRESSES}],
    "get_address": [{"method": "GET", "path": "/addresses/{adr_id}"}],
    "delete_address": [{"method": "DELETE", "path": "/addresses/{adr_id}"}],
    "list_addresses": [{"method": "GET", "path": _EP_ADDRESSES}],
    "verify_us_address": [{"method": "POST", "path": _EP_US_VERIFICATIONS}],
    "verify_intl_address": [{"method": "POST", "path": _EP_INTL_VERIFICATIONS}],
    "autocomplete_address": [{"method": "POST", "path": _EP_US_AUTOCOMPLETIONS}],
    "us_zip_lookup": [{"method": "POST", "path": _EP_US_ZIP_LOOKUPS}],
    "create_postcard": [{"method": "POST", "path": _EP_POSTCARDS}],
    "get_postcard": [{"method": "GET", "path": "/postcards/{psc_id}"}],
    "cancel_postcard": [{"method": "DELETE", "path": "/postcards/{psc_id}"}],
    "list_postcards": [{"method": "GET", "path": _EP_POSTCARDS}],
    "create_letter": [{"method": "POST", "path": _EP_LETTERS}],
    "get_letter": [{"method": "GET", "path": "/letters/{ltr_id}"}],
    "cancel_letter": [{"method": "DELETE", "path": "/letters/{ltr_id}"}],
    "list_letters": [{"method": "GET", "path": _EP_LETTERS}],
    "create_check": [{"method": "POST", "path": _EP_CHECKS}],
    "get_check": [{"method": "GET", "path": "/checks/{chk_id}"}],
    "cancel_check": [{"method": "DELETE", "path": "/checks/{chk_id}"}],
    "list_checks": [{"method": "GET", "path": _EP_CHECKS}],
    "create_bank_account": [{"method": "POST", "path": _EP_BANK_ACCOUNTS}],
    "get_bank_account": [{"method": "GET", "path": "/bank_accounts/{bank_id}"}],
    "delete_bank_account": [{"method": "DELETE", "path": "/bank_accounts/{bank_id}"}],
    "verify_bank_account": [{"method": "POST", "path": "/bank_accounts/{bank_id}/verify"}],
    "list_bank_accounts": [{"method": "GET", "path": _EP_BANK_ACCOUNTS}],
}
