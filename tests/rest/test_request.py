import pytest

from krakenapi.config import KrakenConfig
from krakenapi.errors import InvalidMethod
from krakenapi.rest import request as request_module
from krakenapi.rest.auth import sign
from krakenapi.rest.request import build_request


SECRET = "kQH5HW/8p1uGOVjbgWA7FunAmGO8lsSUXNsu3eow76sz84Q18fWxnyRzBHCd3pd5nE9qa99HAZtuZuj6F1huXg=="
NONCE = 1616492376594000


# ==== PyTest Fixtures
# ========================================


@pytest.fixture
def config():
    return KrakenConfig(api_key="test-key", api_secret=SECRET)


@pytest.fixture(autouse=True)
def fixed_nonce(monkeypatch):
    monkeypatch.setattr(request_module, "nonce", lambda: NONCE)


# ==== Tests
# ========================================


def test_public_request(config):
    req = build_request("Ticker", {"pair": "XBTUSD"}, config)

    assert req.url == "https://api.kraken.com/0/public/Ticker"
    assert req.headers == {"API-Key": "test-key", "User-Agent": config.user_agent}
    assert req.data == {"pair": "XBTUSD", "nonce": NONCE}


def test_private_request_is_signed(config):
    req = build_request("Balance", None, config)

    assert req.url == "https://api.kraken.com/0/private/Balance"
    assert req.headers["API-Key"] == "test-key"
    assert req.headers["API-Sign"] == sign({"nonce": NONCE}, "/0/private/Balance", SECRET)


def test_private_signature_is_deterministic(config):
    first = build_request("AddOrder", {"pair": "XBTUSD", "type": "buy"}, config)
    second = build_request("AddOrder", {"pair": "XBTUSD", "type": "buy"}, config)
    assert first.headers["API-Sign"] == second.headers["API-Sign"]


def test_alias_builds_exchange_path(config):
    req = build_request("account_balance", {}, config)
    assert req.url == "https://api.kraken.com/0/private/Balance"


def test_otp_is_added(config):
    req = build_request("Balance", {"asset": "XBT"}, config, otp="123456")
    assert list(req.data.items()) == [("asset", "XBT"), ("nonce", NONCE), ("otp", "123456")]


def test_injected_values_override_caller_params(config):
    req = build_request("Balance", {"nonce": 1, "otp": "caller"}, config, otp="123456")
    assert req.data["nonce"] == NONCE
    assert req.data["otp"] == "123456"


def test_caller_params_not_mutated(config):
    params = {"pair": "XBTUSD"}
    build_request("Ticker", params, config)
    assert params == {"pair": "XBTUSD"}


def test_invalid_method(config):
    with pytest.raises(InvalidMethod, match="Bogus is not a valid API method."):
        build_request("Bogus", {}, config)
