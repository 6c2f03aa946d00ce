"""Build the url, headers and body of a Kraken REST request."""
from typing import Any, Dict, NamedTuple, Optional

from krakenapi.config import KrakenConfig
from krakenapi.errors import InvalidMethod
from .auth import nonce, sign
from .methods import MethodPrivacy, get_method_type, resolve_method


class KrakenRequest(NamedTuple):
    url: str
    headers: Dict[str, str]
    data: Dict[str, Any]


def build_request(method_name: str,
                  method_params: Optional[dict],
                  config: KrakenConfig,
                  otp: Optional[str] = None
                  ) -> KrakenRequest:
    """Assemble a request ready for the transport.

    Args:
        method_name (str): exchange method name (e.g "Balance") or its alias (e.g "account_balance")
        method_params (dict): (optional) API request parameters
        config (KrakenConfig): credential pair and connection settings
        otp (str): (optional) one-time password

    Raises:
        InvalidMethod: if the method is not a known public or private method
    """
    method_type = get_method_type(method_name)
    if method_type is None:
        raise InvalidMethod(method_name)

    path = f"/{config.api_version}/{method_type.value}/{resolve_method(method_name)}"

    # nonce and otp are set last so they override any caller value
    data = dict(method_params or {})
    data["nonce"] = nonce()
    if otp:
        data["otp"] = otp

    headers = {
        "API-Key": config.api_key,
        "User-Agent": config.user_agent,
    }
    if method_type is MethodPrivacy.PRIVATE:
        headers["API-Sign"] = sign(data, path, config.api_secret)

    return KrakenRequest(url=f"{config.base_url}{path}", headers=headers, data=data)
