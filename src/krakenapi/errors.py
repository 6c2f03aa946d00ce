"""Exceptions raised by the Kraken REST client.

Transport failures (httpx errors, undecodable json) are not wrapped and reach
the caller as raised by httpx or ujson.
"""
from typing import List, Optional


class KrakenError(Exception):
    """Base class of all client errors"""


class ConfigurationError(KrakenError):
    """API key or secret could not be loaded"""


class InvalidMethod(KrakenError):

    def __init__(self, method_name: str):
        super().__init__(f"{method_name} is not a valid API method.")
        self.method_name = method_name


class ExchangeError(KrakenError):
    """Error list returned by Kraken in the response envelope.

    Args:
        message (str): sigil-stripped error messages, newline separated
        raw_errors (list): error list as returned by the exchange
        endpoint (str): API URL path sans host
    """

    def __init__(self, message: str, raw_errors: Optional[List[str]] = None, endpoint: Optional[str] = None):
        super().__init__(message)
        self.raw_errors = raw_errors or []
        self.endpoint = endpoint


class UnknownExchangeError(ExchangeError):

    def __init__(self, raw_errors: Optional[List[str]] = None, endpoint: Optional[str] = None):
        super().__init__("Kraken API returned an unknown error", raw_errors, endpoint)


class RateLimitExceeded(ExchangeError):
    pass


class DDoSProtection(ExchangeError):
    pass


class BadRequest(ExchangeError):
    pass


class ExchangeNotAvailable(ExchangeError):
    pass


class PermissionDenied(ExchangeError):
    pass


class AuthenticationError(ExchangeError):
    pass


class InvalidSignature(AuthenticationError):
    pass


class InvalidNonce(AuthenticationError):
    pass


class InsufficientFunds(ExchangeError):
    pass


class OrderNotFound(ExchangeError):
    pass


class Deprecated(ExchangeError):
    pass


# see: https://support.kraken.com/hc/en-us/articles/360001491786-API-Error-Codes
map_errors = {

        # Errors related to rate limits
        'EOrder:Rate limit exceeded': DDoSProtection,
        'EGeneral:Temporary lockout': DDoSProtection,
        'EAPI:Rate limit exceeded': RateLimitExceeded,

        # General usage errors
        'EQuery:Unknown asset pair': BadRequest,
        'EGeneral:Invalid arguments': BadRequest,
        'EGeneral:Internal error': ExchangeNotAvailable,
        'EGeneral:Permission denied': PermissionDenied,
        'EAPI:Invalid key': AuthenticationError,
        'EAPI:Invalid signature': InvalidSignature,
        'EAPI:Invalid nonce': InvalidNonce,
        'EAPI:Feature disabled': Deprecated,

        # Service status errors
        'EService:Unavailable': ExchangeNotAvailable,
        'EService:Busy': ExchangeNotAvailable,

        # Order placing errors
        'EOrder:Insufficient funds': InsufficientFunds,

        # Not documented by Kraken
        'EOrder:Invalid order': OrderNotFound,
}
