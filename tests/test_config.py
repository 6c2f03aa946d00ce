import pytest
from pydantic import ValidationError

from krakenapi.config import KrakenConfig
from krakenapi.errors import ConfigurationError


SECRET = "kQH5HW/8p1uGOVjbgWA7FunAmGO8lsSUXNsu3eow76sz84Q18fWxnyRzBHCd3pd5nE9qa99HAZtuZuj6F1huXg=="


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    # setenv first so monkeypatch also removes what load_dotenv writes
    for var in ("API_KEY", "API_SECRET", "OTP_KRAKEN"):
        monkeypatch.setenv(var, "")
        monkeypatch.delenv(var)
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_defaults():
    config = KrakenConfig(api_key="key", api_secret=SECRET)
    assert config.base_url == "https://api.kraken.com"
    assert config.api_version == 0
    assert config.otp is None
    assert config.user_agent.startswith("krakenapi/")


def test_config_is_frozen():
    config = KrakenConfig(api_key="key", api_secret=SECRET)
    with pytest.raises(ValidationError):
        config.api_key = "other"


def test_from_env(clean_env, monkeypatch):
    monkeypatch.setenv("API_KEY", "key")
    monkeypatch.setenv("API_SECRET", SECRET)
    monkeypatch.setenv("OTP_KRAKEN", "123456")

    config = KrakenConfig.from_env()
    assert config.api_key == "key"
    assert config.api_secret == SECRET
    assert config.otp == "123456"


def test_from_env_file(clean_env):
    env_file = clean_env / "kraken.env"
    env_file.write_text(f"API_KEY=file-key\nAPI_SECRET={SECRET}\n")

    config = KrakenConfig.from_env(str(env_file))
    assert config.api_key == "file-key"
    assert config.otp is None


def test_from_dotenv_in_cwd(clean_env):
    (clean_env / ".env").write_text(f"API_KEY=dotenv-key\nAPI_SECRET={SECRET}\nOTP_KRAKEN=654321\n")

    config = KrakenConfig.from_env()
    assert config.api_key == "dotenv-key"
    assert config.otp == "654321"


def test_missing_secret(clean_env, monkeypatch):
    monkeypatch.setenv("API_KEY", "key")

    with pytest.raises(ConfigurationError, match="API_SECRET"):
        KrakenConfig.from_env()


def test_missing_key_and_secret(clean_env):
    with pytest.raises(ConfigurationError, match="API_KEY or API_SECRET"):
        KrakenConfig.from_env()


def test_missing_field_is_configuration_error():
    with pytest.raises(ConfigurationError, match="api_secret"):
        KrakenConfig(api_key="key")


@pytest.mark.parametrize("key, secret, missing", [
    ("", SECRET, "api_key"),
    ("key", "", "api_secret"),
    (None, None, "api_key and api_secret"),
])
def test_empty_credentials_are_configuration_error(key, secret, missing):
    with pytest.raises(ConfigurationError, match=missing):
        KrakenConfig(api_key=key, api_secret=secret)
