import sys
import asyncio

import click
import structlog
import ujson

from krakenapi.config import KrakenConfig
from krakenapi.errors import KrakenError
from krakenapi.logging.structlogger import configure_logging, log_exception
from krakenapi.rest.api import get_api


logger = structlog.get_logger(__name__)


def _parse_params(params):
    parsed = {}
    for param in params:
        key, sep, value = param.partition("=")
        if not sep:
            raise click.BadParameter(f"{param} is not of format key=value", param_hint="--param")
        parsed[key] = value
    return parsed


@click.command()
@click.argument("method")
@click.option("--param", "-p", "params", multiple=True, help="Request parameter as key=value")
@click.option("--otp", default=None, help="One-time password")
@click.option("--env-file", default=None, help="Path to env file holding API_KEY and API_SECRET")
def query(method, params, otp, env_file):
    """Query a public or private Kraken METHOD and print the result as json."""
    configure_logging()

    data = _parse_params(params)
    try:
        api = get_api(otp=otp, config=KrakenConfig.from_env(env_file))
        result = asyncio.run(api(method, data))
    except KrakenError as e:
        log_exception(logger, e)
        sys.exit(1)

    click.echo(ujson.dumps(result, indent=2))
