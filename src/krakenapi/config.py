"""Kraken client configuration.

Credentials are read once, when the client is built, from the environment
(``.env`` file included) or passed explicitly as a :class:`KrakenConfig`.

In .env file:
    API_KEY : Kraken API key
    API_SECRET : base64 encoded Kraken API secret
    OTP_KRAKEN : (optional) default one-time password
"""
import os
from typing import Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ConfigDict, constr, model_validator

from krakenapi import __version__
from krakenapi.errors import ConfigurationError
from krakenapi.rest.endpoints_map import mapping


USER_AGENT = f"krakenapi/{__version__} (Python, httpx)"

CREDENTIALS = ("api_key", "api_secret")


def missing_credentials(values) -> list:
    """Names of the credentials that are absent or empty"""
    return [name for name in CREDENTIALS if not values.get(name)]


class KrakenConfig(BaseModel):
    """Immutable credential pair plus connection settings.

    Args:
        api_key (str): API key, sent as ``API-Key`` header
        api_secret (str): base64 encoded secret used to sign private requests
        otp (str): (optional) one-time password added to every request body

    Raises:
        ConfigurationError: if api_key or api_secret is missing or empty
    """
    model_config = ConfigDict(frozen=True)

    api_key: constr(min_length=1)
    api_secret: constr(min_length=1)
    otp: Optional[str] = None
    base_url: str = mapping["Kraken"]["base_url"]
    api_version: int = mapping["Kraken"]["version"]
    user_agent: str = USER_AGENT

    @model_validator(mode="before")
    @classmethod
    def check_credentials(cls, values):
        # not a ValueError, so pydantic lets it through unwrapped
        if isinstance(values, dict):
            missing = missing_credentials(values)
            if missing:
                raise ConfigurationError(f"Missing {' and '.join(missing)} in config")
        return values

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> "KrakenConfig":
        """Load credentials from env file and environment variables.

        Raises:
            ConfigurationError: if API_KEY or API_SECRET is not set
        """
        load_dotenv(dotenv_path=env_file or find_dotenv(usecwd=True))

        key = os.environ.get("API_KEY")
        secret = os.environ.get("API_SECRET")

        missing = [name for name, value in (("API_KEY", key), ("API_SECRET", secret)) if not value]
        if missing:
            raise ConfigurationError(f"Could not find or load {' or '.join(missing)} from env")

        return cls(api_key=key, api_secret=secret, otp=os.environ.get("OTP_KRAKEN") or None)
