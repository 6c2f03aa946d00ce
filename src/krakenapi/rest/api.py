"""Kraken Rest API

Usage:
    api = get_api()
    balance = await api("Balance")
    ticker = await api("Ticker", {"pair": "XBTUSD"})
"""
from typing import Optional, Union

import httpx

from krakenapi.config import CREDENTIALS, KrakenConfig, missing_credentials
from krakenapi.errors import ConfigurationError
from .request import build_request
from .transport import DEFAULT_TIMEOUT, make_request


def get_api(otp: Optional[str] = None,
            config: Optional[KrakenConfig] = None,
            session: Optional[httpx.AsyncClient] = None,
            timeout: Union[float, int] = DEFAULT_TIMEOUT
            ):
    """Bind a credential pair to a client function.

    Args:
        otp (str): (optional) one-time password, overrides ``config.otp``
        config (KrakenConfig): (optional) credentials and settings,
            loaded from env when not given
        session (httpx.AsyncClient): (optional) client reused for every request
        timeout (float): request timeout in seconds

    Returns:
        coroutine function ``(method_name, method_params) -> result``

    Raises:
        ConfigurationError: if API key or secret is missing, from env or from the given config
    """
    if config is None:
        config = KrakenConfig.from_env()

    missing = missing_credentials({name: getattr(config, name, None) for name in CREDENTIALS})
    if missing:
        raise ConfigurationError(f"Missing {' and '.join(missing)} in config")

    otp = otp or config.otp

    async def query(method_name: str, method_params: Optional[dict] = None):
        """Query a public or private Kraken method.

        Args:
            method_name (str): exchange method name or alias
            method_params (dict): (optional) API request parameters

        Returns:
            result payload of the response
        """
        request = build_request(method_name, method_params, config, otp=otp)
        return await make_request(request, session=session, timeout=timeout)

    return query
