"""Send a single request to Kraken and interpret the response envelope."""
from typing import Any, List, Optional, Union

import httpx
import structlog
import ujson
from pydantic import BaseModel

from krakenapi.errors import ExchangeError, UnknownExchangeError, map_errors
from .auth import encode_body
from .request import KrakenRequest


logger = structlog.get_logger(__name__)

# seconds
DEFAULT_TIMEOUT = 5

ERROR_SIGIL = "E"


class KrakenResponse(BaseModel):
    """Kraken response envelope

    Args:
        error (list): error and warning messages, empty on success
        result (typing.Any): payload of the response
    """
    error: Optional[List[str]] = None
    result: Any = None


def handle_errors(response: dict, endpoint: Optional[str] = None):
    """Return the result of a decoded response or raise its errors.

    Only messages starting with the error sigil are errors, the others
    are warnings.

    Raises:
        pydantic.ValidationError: if the decoded body is not a json object
        ExchangeError: subclass mapped from the first error code
        UnknownExchangeError: if the error list only holds warnings
    """
    envelope = KrakenResponse.model_validate(response)

    if not envelope.error:
        return envelope.result

    errors = [e for e in envelope.error if e.startswith(ERROR_SIGIL)]
    logger.error(f"Error with request : {envelope.error} - Endpoint : {endpoint}")

    if not errors:
        raise UnknownExchangeError(raw_errors=envelope.error, endpoint=endpoint)

    message = "\n".join(e[len(ERROR_SIGIL):] for e in errors)
    exc_class = map_errors.get(errors[0], ExchangeError)
    raise exc_class(message, raw_errors=envelope.error, endpoint=endpoint)


async def _post(session: httpx.AsyncClient, request: KrakenRequest, timeout: Union[float, int]) -> httpx.Response:
    headers = {**request.headers, "Content-Type": "application/x-www-form-urlencoded"}
    return await session.post(request.url,
                              content=encode_body(request.data),
                              headers=headers,
                              timeout=timeout
                              )


async def make_request(request: KrakenRequest,
                       session: Optional[httpx.AsyncClient] = None,
                       timeout: Union[float, int] = DEFAULT_TIMEOUT
                       ):
    """Low-level query handling.

    Args:
        request (KrakenRequest): url, headers and body parameters
        session (httpx.AsyncClient): (optional) client to send the request with,
            a new one is opened and closed for this request otherwise
        timeout (float): throw Error after ``timeout`` seconds if no response

    Returns:
        result payload of the response

    Raises:
        httpx.HTTPError: network failure, timeout or non successful status
        ValueError: if the response body is not a valid json object
        ExchangeError: if Kraken returned errors
    """
    if session is None:
        async with httpx.AsyncClient() as client:
            response = await _post(client, request, timeout)
    else:
        response = await _post(session, request, timeout)

    response.raise_for_status()

    logger.info(f"API Request URL: {response.url}")

    endpoint = response.url.path
    return handle_errors(ujson.loads(response.text), endpoint=endpoint)
