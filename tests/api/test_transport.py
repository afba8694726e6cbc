"""Transport Framing — JSONResponse built from an ApiResponse.

Tests cover:
    - Status code and body copied unchanged
    - CORS headers follow Settings
    - require_shape passes valid bodies through and raises on rejection
"""

import json

import pytest

from dappbot.api.responses import to_json_response, transport_headers
from dappbot.api.validation import require_shape
from dappbot.config import Settings
from dappbot.core.errors import InvalidBodyError
from dappbot.core.responses import ResponseOptions, response
from dappbot.schemas.guards import is_core


def test_json_response_copies_status_and_body():
    api_response = response({"message": "nope"}, ResponseOptions(is_err=True, error_response_code=402))
    res = to_json_response(api_response, Settings())
    assert res.status_code == 402
    assert json.loads(res.body) == {"data": None, "err": {"message": "nope"}}


def test_headers_follow_settings():
    settings = Settings(cors_allow_origin="https://dapp.bot", cors_allow_headers="Authorization")
    assert transport_headers(settings) == {
        "Access-Control-Allow-Origin": "https://dapp.bot",
        "Access-Control-Allow-Headers": "Authorization",
    }


def test_require_shape_returns_valid_body():
    body = {
        "DappName": "a", "Abi": "", "Web3URL": "", "GuardianURL": "", "ContractAddr": "",
    }
    assert require_shape(body, is_core, "Core") is body


def test_require_shape_raises_on_rejection():
    with pytest.raises(InvalidBodyError) as exc_info:
        require_shape({"DappName": "a"}, is_core, "Core")
    assert exc_info.value.to_response().status_code == 400
