from __future__ import annotations

import copy

import pytest


_TS = "2019-07-27T23:49:01.511Z"

ADDRESS = {
    "id": "adr_d3489cd64c791ab5",
    "description": None,
    "name": "HARRY ZHANG",
    "company": None,
    "phone": None,
    "email": None,
    "address_line1": "210 KING ST",
    "address_line2": None,
    "address_city": "SAN FRANCISCO",
    "address_state": "CA",
    "address_zip": "94107-1728",
    "address_country": "UNITED STATES",
    "metadata": {},
    "date_created": _TS,
    "date_modified": _TS,
    "object": "address",
}

THUMBNAILS = [
    {
        "small": "https://lob-assets.com/postcards/psc_1_thumb_small_1.png",
        "medium": "https://lob-assets.com/postcards/psc_1_thumb_medium_1.png",
        "large": "https://lob-assets.com/postcards/psc_1_thumb_large_1.png",
    }
]

POSTCARD = {
    "id": "psc_5c002b86ce47537a",
    "description": "Demo Postcard job",
    "metadata": {"campaign": "fall"},
    "to": ADDRESS,
    "from": ADDRESS,
    "url": "https://lob-assets.com/postcards/psc_5c002b86ce47537a.pdf",
    "front_template_id": None,
    "back_template_id": None,
    "front_template_version_id": None,
    "back_template_version_id": None,
    "carrier": "USPS",
    "tracking_events": [],
    "thumbnails": THUMBNAILS,
    "merge_variables": {"name": "Harry"},
    "size": "4x6",
    "mail_type": "usps_first_class",
    "expected_delivery_date": "2019-08-02",
    "date_created": _TS,
    "date_modified": _TS,
    "send_date": _TS,
    "object": "postcard",
}

LETTER = {
    "id": "ltr_4868c3b754655f90",
    "description": "Demo Letter",
    "metadata": {},
    "to": ADDRESS,
    "from": ADDRESS,
    "color": True,
    "double_sided": True,
    "address_placement": "top_first_page",
    "return_envelope": False,
    "perforated_page": None,
    "custom_envelope": None,
    "extra_service": "certified",
    "mail_type": "usps_first_class",
    "url": "https://lob-assets.com/letters/ltr_4868c3b754655f90.pdf",
    "merge_variables": None,
    "template_id": None,
    "template_version_id": None,
    "carrier": "USPS",
    "tracking_number": None,
    "tracking_events": [
        {
            "id": "evnt_9e84094c9368cfb",
            "name": "In Transit",
            "location": "72231",
            "time": _TS,
            "date_created": _TS,
            "date_modified": _TS,
            "object": "tracking_event",
        }
    ],
    "thumbnails": THUMBNAILS,
    "expected_delivery_date": "2019-08-02",
    "date_created": _TS,
    "date_modified": _TS,
    "send_date": _TS,
    "object": "letter",
}

BANK_ACCOUNT = {
    "id": "bank_8cad8df5354d33f",
    "description": "Test Bank Account",
    "metadata": {},
    "routing_number": "322271627",
    "account_number": "123456789",
    "account_type": "company",
    "signatory": "John Doe",
    "signature_url": None,
    "bank_name": "J.P. MORGAN CHASE BANK, N.A.",
    "verified": False,
    "date_created": _TS,
    "date_modified": _TS,
    "object": "bank_account",
}

CHECK = {
    "id": "chk_534f10783683daa0",
    "description": "Demo Check",
    "metadata": {},
    "check_number": 10062,
    "memo": "rent",
    "amount": 22.5,
    "message": "Thanks for your business",
    "url": "https://lob-assets.com/checks/chk_534f10783683daa0.pdf",
    "check_bottom_template_id": None,
    "attachment_template_id": None,
    "check_bottom_template_version_id": None,
    "attachment_template_version_id": None,
    "to": ADDRESS,
    "from": ADDRESS,
    "bank_account": BANK_ACCOUNT,
    "carrier": "USPS",
    "tracking_number": None,
    "tracking_events": [],
    "thumbnails": THUMBNAILS,
    "merge_variables": None,
    "expected_delivery_date": "2019-08-02",
    "mail_type": "usps_first_class",
    "date_created": _TS,
    "date_modified": _TS,
    "send_date": _TS,
    "object": "check",
}

US_VERIFICATION = {
    "id": "us_ver_c7cb63d68f8d6",
    "recipient": "LOB.COM",
    "primary_line": "185 BERRY ST STE 6100",
    "secondary_line": "",
    "urbanization": "",
    "last_line": "SAN FRANCISCO CA 94107-1741",
    "deliverability": "deliverable",
    "components": {
        "primary_number": "185",
        "street_predirection": "",
        "street_name": "BERRY",
        "street_suffix": "ST",
        "street_postdirection": "",
        "secondary_designator": "STE",
        "secondary_number": "6100",
        "pmb_designator": "",
        "pmb_number": "",
        "extra_secondary_designator": "",
        "extra_secondary_number": "",
        "city": "SAN FRANCISCO",
        "state": "CA",
        "zip_code": "94107",
        "zip_code_plus_4": "1741",
        "zip_code_type": "standard",
        "delivery_point_barcode": "941071741992",
        "address_type": "commercial",
        "record_type": "highrise",
        "default_building_address": False,
        "county": "SAN FRANCISCO",
        "county_fips": "06075",
        "carrier_route": "C001",
        "carrier_route_type": "city_delivery",
        "latitude": 37.77597542841264,
        "longitude": -122.3929557343685,
    },
    "deliverability_analysis": {
        "dpv_confirmation": "Y",
        "dpv_cmra": "N",
        "dpv_vacant": "N",
        "dpv_active": "Y",
        "dpv_footnotes": ["AA", "BB"],
        "ews_match": False,
        "lacs_indicator": "",
        "lacs_return_code": "",
        "suite_return_code": "",
    },
    "object": "us_verification",
}


@pytest.fixture
def address_payload() -> dict:
    return copy.deepcopy(ADDRESS)


@pytest.fixture
def postcard_payload() -> dict:
    return copy.deepcopy(POSTCARD)


@pytest.fixture
def letter_payload() -> dict:
    return copy.deepcopy(LETTER)


@pytest.fixture
def check_payload() -> dict:
    return copy.deepcopy(CHECK)


@pytest.fixture
def bank_account_payload() -> dict:
    return copy.deepcopy(BANK_ACCOUNT)


@pytest.fixture
def us_verification_payload() -> dict:
    return copy.deepcopy(US_VERIFICATION)
