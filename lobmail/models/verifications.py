from __future__ import annotations

from typing import Literal

from pydantic import Field, IPvAnyAddress

from lobmail.domain.codecs import EmptyStrOptional, YesNo
from lobmail.models.common import RequestModel, ResponseModel


Deliverability = Literal[
    "deliverable",
    "deliverable_unnecessary_unit",
    "deliverable_incorrect_unit",
    "deliverable_missing_unit",
    "undeliverable",
]
IntlDeliverability = Literal[
    "deliverable",
    "deliverable_missing_info",
    "undeliverable",
    "no_match",
]
ZipCodeType = Literal["standard", "military", "unique", "po_box"]
AddressType = Literal["residential", "commercial"]
RecordType = Literal["street", "highrise", "firm", "po_box", "rural_route"]
CarrierRouteType = Literal[
    "city_delivery",
    "rural_route",
    "highway_contract",
    "po_box",
    "general_delivery",
    # Undocumented, but returned by the live API.
    "contract",
]
Case = Literal["upper", "proper"]

# Y: deliverable. S: deliverable once the secondary unit is dropped.
# D: default building address, unit missing. N: not deliverable.
DpvConfirmation = Literal["Y", "S", "D", "N"]
DpvCode = Literal[
    "AA",  # street and ZIP valid
    "A1",  # invalid address
    "BB",  # deliverable
    "CC",  # deliverable without the secondary unit
    "N1",  # deliverable, missing secondary info
    "F1",  # military address
    "G1",  # general delivery
    "U1",  # unique ZIP
    "M1",  # primary number missing
    "M3",  # primary number invalid
    "P1",  # PO/RR/HC box number missing
    "P3",  # PO/RR/HC box number invalid
    "R1",  # CMRA without private mailbox
    "R7",  # phantom carrier route R777
    "RR",  # CMRA with private mailbox
]
# A: converted via LACSLink. 92: matched after dropping secondary.
# 14: matched but not convertible. 00: no match.
LacsReturnCode = Literal["A", "92", "14", "00"]
SuiteReturnCode = Literal["A", "00"]


class VerificationComponents(ResponseModel):
    primary_number: str
    street_predirection: EmptyStrOptional[str] = None
    street_name: str
    street_suffix: EmptyStrOptional[str] = None
    street_postdirection: EmptyStrOptional[str] = None
    secondary_designator: EmptyStrOptional[str] = None
    secondary_number: EmptyStrOptional[str] = None
    pmb_designator: EmptyStrOptional[str] = None
    pmb_number: EmptyStrOptional[str] = None
    extra_secondary_designator: EmptyStrOptional[str] = None
    extra_secondary_number: EmptyStrOptional[str] = None
    city: str
    state: str
    zip_code: str
    zip_code_plus_4: EmptyStrOptional[str] = None
    zip_code_type: EmptyStrOptional[ZipCodeType] = None
    delivery_point_barcode: EmptyStrOptional[str] = None
    address_type: EmptyStrOptional[AddressType] = None
    record_type: EmptyStrOptional[RecordType] = None
    default_building_address: bool
    county: str
    county_fips: str
    carrier_route: str
    carrier_route_type: EmptyStrOptional[CarrierRouteType] = None
    latitude: float | None = None
    longitude: float | None = None


class DeliverabilityAnalysis(ResponseModel):
    # None means the address is undeliverable.
    dpv_confirmation: EmptyStrOptional[DpvConfirmation] = None
    dpv_cmra: YesNo = None
    dpv_vacant: YesNo = None
    dpv_active: YesNo = None
    dpv_footnotes: list[DpvCode] = Field(default_factory=list)
    ews_match: bool
    lacs_indicator: YesNo = None
    lacs_return_code: EmptyStrOptional[LacsReturnCode] = None
    suite_return_code: EmptyStrOptional[SuiteReturnCode] = None


class UsVerification(ResponseModel):
    id: str
    recipient: EmptyStrOptional[str] = None
    primary_line: str
    secondary_line: EmptyStrOptional[str] = None
    urbanization: EmptyStrOptional[str] = None
    last_line: str
    deliverability: Deliverability
    components: VerificationComponents
    deliverability_analysis: DeliverabilityAnalysis
    object: Literal["us_verification"]


class UsVerificationInput(RequestModel):
    """Address components to verify; pass a plain string for a single-line address."""

    recipient: str | None = None
    primary_line: str
    secondary_line: str | None = None
    urbanization: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: str | None = None


class VerifyAddressOptions(RequestModel):
    case: Case | None = None


class IntlVerificationInput(RequestModel):
    recipient: str | None = None
    primary_line: str
    secondary_line: str | None = None
    city: str | None = None
    state: str | None = None
    postal_code: str | None = None
    # ISO 3166 alpha-2; US territories go through the US endpoint instead.
    country: str = Field(min_length=2, max_length=2)


class IntlAddressComponents(ResponseModel):
    primary_number: EmptyStrOptional[str] = None
    street_name: EmptyStrOptional[str] = None
    city: EmptyStrOptional[str] = None
    state: EmptyStrOptional[str] = None
    postal_code: EmptyStrOptional[str] = None


class IntlVerification(ResponseModel):
    id: str
    recipient: EmptyStrOptional[str] = None
    primary_line: str
    secondary_line: EmptyStrOptional[str] = None
    last_line: str
    country: str
    deliverability: IntlDeliverability
    components: IntlAddressComponents
    object: Literal["intl_verification"]


class AutocompleteSuggestion(ResponseModel):
    primary_line: str
    city: str
    state: str
    zip_code: str


class UsAutocompletion(ResponseModel):
    id: str
    suggestions: list[AutocompleteSuggestion]
    object: Literal["us_autocompletion"]


class AutocompleteAddressOptions(RequestModel):
    city: str | None = None
    state: str | None = None
    # Sent as X-Forwarded-For; the query only says that sorting was requested.
    geo_ip_sort: IPvAnyAddress | None = None
    # Requires explicit permission from Lob.
    only_valid_addresses: bool | None = None


class AutocompleteQuery(RequestModel):
    address_prefix: str
    city: str | None = None
    state: str | None = None
    geo_ip_sort: bool | None = None
    only_valid_addresses: bool | None = None

    @classmethod
    def build(cls, address_prefix: str, options: AutocompleteAddressOptions | None) -> AutocompleteQuery:
        options = options or AutocompleteAddressOptions()
        return cls(
            address_prefix=address_prefix,
            city=options.city,
            state=options.state,
            geo_ip_sort=True if options.geo_ip_sort is not None else None,
            only_valid_addresses=options.only_valid_addresses,
        )


class City(ResponseModel):
    city: str
    state: str
    county: str
    county_fips: str
    preferred: bool


class UsZipLookup(ResponseModel):
    id: str
    zip_code: str
    zip_code_type: EmptyStrOptional[ZipCodeType] = None
    cities: list[City]
    object: Literal["us_zip_lookup"]
