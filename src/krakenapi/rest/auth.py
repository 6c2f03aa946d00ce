"""Kraken request authentication.

see: https://docs.kraken.com/rest/#section/Authentication
"""
import base64
import hashlib
import hmac
import time
import urllib.parse


def nonce() -> int:
    """Nonce counter.

    Millisecond clock scaled to microseconds. Two calls within the same
    millisecond return the same value.

    Returns:
        a non-decreasing unsigned integer (up to 64 bits wide)
    """
    return int(1000*time.time()) * 1000


def _format_value(value):
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(str(v) for v in value)
    return value


def encode_body(data: dict) -> str:
    """Form encode request parameters, keeping insertion order.

    None values are dropped, booleans are lowercased and lists are
    comma delimited, which is what Kraken expects (e.g. ``pair=XBTUSD,ETHUSD``).
    """
    cleaned = [(k, _format_value(v)) for k, v in data.items() if v is not None]
    return urllib.parse.urlencode(cleaned)


def sign(data: dict, urlpath: str, secret: str) -> str:
    """Sign request data according to Kraken's scheme.

    Args:
        data (dict): API request parameters, must contain nonce
        urlpath (str): API URL path sans host
        secret (str): base64 encoded API secret

    Returns:
        base64 encoded signature digest

    Raises:
        binascii.Error: if secret is not valid base64
    """
    postdata = encode_body(data)

    # Unicode-objects must be encoded before hashing
    encoded = (str(data["nonce"]) + postdata).encode()
    message = urlpath.encode() + hashlib.sha256(encoded).digest()

    signature = hmac.new(base64.b64decode(secret, validate=True),
                         message,
                         hashlib.sha512)
    sigdigest = base64.b64encode(signature.digest())

    return sigdigest.decode()
