"""Tests for credential and settings loading."""
import json

import pytest

from google_ads_mcp.config import load_credentials, load_settings, normalize_customer_id
from google_ads_mcp.errors import InitializationError

CREDENTIALS = {
    "client_id": "client-id.apps.googleusercontent.com",
    "client_secret": "secret",
    "developer_token": "dev-token",
    "refresh_token": "refresh-token",
    "login_customer_id": "485-017-2260",
    "customer_id": "123-456-7890",
}


def _env(**overrides):
    config = dict(CREDENTIALS)
    config.update(overrides)
    return {"GOOGLE_ADS_CONFIG": json.dumps(config)}


class TestLoadCredentials:
    def test_json_blob(self):
        credentials = load_credentials(_env())

        assert credentials.client_id == "client-id.apps.googleusercontent.com"
        assert credentials.login_customer_id == "4850172260"
        assert credentials.customer_id == "1234567890"

    def test_client_config_uses_proto_plus(self):
        config = load_credentials(_env()).to_client_config()

        assert config["use_proto_plus"] is True
        assert "customer_id" not in config

    def test_yaml_file(self, tmp_path):
        path = tmp_path / "google-ads.yaml"
        path.write_text(
            "client_id: yaml-client\n"
            "client_secret: secret\n"
            "developer_token: dev-token\n"
            "refresh_token: refresh-token\n"
            "login_customer_id: 4850172260\n"
        )

        credentials = load_credentials({"GOOGLE_ADS_YAML_PATH": str(path)})

        assert credentials.client_id == "yaml-client"
        assert credentials.login_customer_id == "4850172260"
        assert credentials.customer_id is None

    def test_json_takes_precedence_over_yaml(self, tmp_path):
        environ = _env()
        environ["GOOGLE_ADS_YAML_PATH"] = str(tmp_path / "missing.yaml")

        assert load_credentials(environ).client_secret == "secret"

    def test_missing_yaml_file(self, tmp_path):
        with pytest.raises(InitializationError, match="config file not found"):
            load_credentials({"GOOGLE_ADS_YAML_PATH": str(tmp_path / "missing.yaml")})

    def test_no_source(self):
        with pytest.raises(InitializationError, match="GOOGLE_ADS_CONFIG environment variable is required"):
            load_credentials({})

    def test_invalid_json(self):
        with pytest.raises(InitializationError, match="not valid JSON"):
            load_credentials({"GOOGLE_ADS_CONFIG": "{not json"})

    def test_json_must_be_object(self):
        with pytest.raises(InitializationError):
            load_credentials({"GOOGLE_ADS_CONFIG": "[1, 2]"})

    @pytest.mark.parametrize("field_name", ["client_id", "refresh_token", "login_customer_id"])
    def test_missing_field(self, field_name):
        config = dict(CREDENTIALS)
        del config[field_name]

        with pytest.raises(InitializationError) as exc_info:
            load_credentials({"GOOGLE_ADS_CONFIG": json.dumps(config)})

        assert exc_info.value.reason == f"Missing required field: {field_name}"
        assert str(exc_info.value) == (
            f"Failed to initialize Google Ads client: Missing required field: {field_name}"
        )

    def test_empty_field(self):
        with pytest.raises(InitializationError, match="Missing required field: developer_token"):
            load_credentials(_env(developer_token=""))


class TestLoadSettings:
    def test_customer_id_from_credentials(self):
        settings = load_settings(_env())

        assert settings.customer_id == "1234567890"
        assert settings.currency_code == "EUR"
        assert settings.currency_symbol == "€"
        assert settings.placeholders.business_name == "AutoTinder AI"
        assert settings.placeholders.final_url is None

    def test_customer_id_override(self):
        environ = _env()
        environ["GOOGLE_ADS_CUSTOMER_ID"] = "999-888-7777"

        assert load_settings(environ).customer_id == "9998887777"

    def test_customer_id_required(self):
        config = dict(CREDENTIALS)
        del config["customer_id"]

        with pytest.raises(InitializationError, match="GOOGLE_ADS_CUSTOMER_ID"):
            load_settings({"GOOGLE_ADS_CONFIG": json.dumps(config)})

    def test_overrides(self):
        environ = _env()
        environ.update({
            "GOOGLE_ADS_CURRENCY_CODE": "USD",
            "GOOGLE_ADS_CURRENCY_SYMBOL": "$",
            "GOOGLE_ADS_BUSINESS_NAME": "Acme",
            "GOOGLE_ADS_FINAL_URL": "https://example.com",
            "GOOGLE_ADS_MCP_LOG_LEVEL": "debug",
        })

        settings = load_settings(environ)

        assert settings.currency_code == "USD"
        assert settings.currency_symbol == "$"
        assert settings.placeholders.business_name == "Acme"
        assert settings.placeholders.final_url == "https://example.com"
        assert settings.log_level == "DEBUG"


def test_normalize_customer_id():
    assert normalize_customer_id("123-456-7890") == "1234567890"
    assert normalize_customer_id(1234567890) == "1234567890"
