import pytest

from file_summarizer.core.config import ProviderConfig, is_placeholder_key, load_provider_config


@pytest.mark.parametrize("api_key", [None, "", "  ", "DUMMY_KEY_UNTIL_CONFIGURED", "changeme", "NULL"])
def test_placeholder_keys(api_key) -> None:
    assert is_placeholder_key(api_key)
    assert ProviderConfig(api_key=api_key).is_configured is False


def test_real_key_is_configured() -> None:
    assert ProviderConfig(api_key="sk-abc123").is_configured is True


def test_load_provider_config_defaults(monkeypatch) -> None:
    for name in ("OPENAI_API_KEY", "OPENAI_MODEL", "OPENAI_BASE_URL", "OPENAI_MAX_TOKENS", "OPENAI_TEMPERATURE", "OPENAI_TIMEOUT_SEC"):
        monkeypatch.delenv(name, raising=False)

    config = load_provider_config()

    assert config == ProviderConfig()
    assert config.model == "text-davinci-003"
    assert config.is_configured is False


def test_load_provider_config_from_env(monkeypatch) -> None:
    monkeypatch.setenv("OPENAI_API_KEY", "sk-env")
    monkeypatch.setenv("OPENAI_MODEL", "gpt-3.5-turbo-instruct")
    monkeypatch.setenv("OPENAI_BASE_URL", "http://localhost:8000/")
    monkeypatch.setenv("OPENAI_MAX_TOKENS", "64")
    monkeypatch.setenv("OPENAI_TEMPERATURE", "0.2")

    config = load_provider_config()

    assert config.api_key == "sk-env"
    assert config.model == "gpt-3.5-turbo-instruct"
    assert config.base_url == "http://localhost:8000"
    assert config.max_tokens == 64
    assert config.temperature == 0.2
    assert config.is_configured is True
