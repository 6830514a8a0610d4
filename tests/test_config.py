"""
Tests for AppConfig, the LLM factory, secrets bootstrap and the null tracer.
"""

import json
import os

import pytest

from src.infrastructure.config import AppConfig
from src.infrastructure.llm.factory import create_language_model
from src.infrastructure.observability.langfuse_adapter import NullObservabilityHandler
from src.infrastructure.secrets.secrets_manager_adapter import SecretsManagerAdapter

BASE_ENV = {
    "CHANNEL_ACCESS_TOKEN": "token",
    "CHANNEL_SECRET": "secret",
    "OPENAI_API_KEY": "sk-test",
}


class TestAppConfig:
    def test_defaults(self):
        config = AppConfig.from_env(BASE_ENV)

        assert config.port == 3000
        assert config.llm_provider == "openai"
        assert config.llm_model is None
        assert config.log_level == "INFO"
        assert config.langfuse_enabled is False

    def test_overrides(self):
        config = AppConfig.from_env(
            {
                **BASE_ENV,
                "PORT": "8080",
                "LLM_MODEL": "gpt-4o-mini",
                "ASSISTANT_PERSONA": "小幫手",
                "LOG_LEVEL": "debug",
                "LANGFUSE_PUBLIC_KEY": "pk",
                "LANGFUSE_SECRET_KEY": "sk",
            }
        )

        assert config.port == 8080
        assert config.llm_model == "gpt-4o-mini"
        assert config.assistant_persona == "小幫手"
        assert config.log_level == "DEBUG"
        assert config.langfuse_enabled is True

    @pytest.mark.parametrize("missing", ["CHANNEL_ACCESS_TOKEN", "CHANNEL_SECRET", "OPENAI_API_KEY"])
    def test_missing_required_variable(self, missing):
        env = {k: v for k, v in BASE_ENV.items() if k != missing}

        with pytest.raises(ValueError, match=missing):
            AppConfig.from_env(env)

    def test_bedrock_does_not_need_openai_key(self):
        env = {k: v for k, v in BASE_ENV.items() if k != "OPENAI_API_KEY"}

        config = AppConfig.from_env({**env, "LLM_PROVIDER": "Bedrock"})

        assert config.llm_provider == "bedrock"
        assert config.openai_api_key is None

    def test_bad_port(self):
        with pytest.raises(ValueError, match="PORT"):
            AppConfig.from_env({**BASE_ENV, "PORT": "http"})


class TestLanguageModelFactory:
    def test_openai_adapter(self):
        from src.infrastructure.llm.openai_adapter import OpenAIChatAdapter

        llm = create_language_model(AppConfig.from_env(BASE_ENV))

        assert isinstance(llm, OpenAIChatAdapter)

    def test_unknown_provider(self):
        config = AppConfig.from_env({**BASE_ENV, "LLM_PROVIDER": "carrier-pigeon"})

        with pytest.raises(ValueError, match="carrier-pigeon"):
            create_language_model(config)


class StubSecretsClient:
    def __init__(self, secret: dict):
        self.secret = secret
        self.requested = []

    def get_secret_value(self, SecretId):
        self.requested.append(SecretId)
        return {"SecretString": json.dumps(self.secret)}


def test_secrets_are_loaded_without_overriding_env(monkeypatch):
    monkeypatch.setenv("CHANNEL_SECRET", "from-env")
    monkeypatch.setenv("CHANNEL_ACCESS_TOKEN", "placeholder")
    monkeypatch.delenv("CHANNEL_ACCESS_TOKEN")
    client = StubSecretsClient({"CHANNEL_SECRET": "from-secret", "CHANNEL_ACCESS_TOKEN": "abc"})

    SecretsManagerAdapter(_client=client).load_into_env("arn:aws:secretsmanager:x")

    assert client.requested == ["arn:aws:secretsmanager:x"]
    assert os.environ["CHANNEL_SECRET"] == "from-env"
    assert os.environ["CHANNEL_ACCESS_TOKEN"] == "abc"


def test_null_tracer_has_no_callback():
    handler = NullObservabilityHandler()

    assert handler.as_callback() is None
    handler.flush()
