import os
from dataclasses import dataclass
from typing import Optional

# 서버/로그
APP_HOST = os.environ.get("APP_HOST", "127.0.0.1")
APP_PORT = int(os.environ.get("APP_PORT", 8080))
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").strip().upper()

# 프론트엔드 개발 서버 (Angular 기본 포트)
CORS_ORIGINS = [o.strip() for o in os.environ.get("CORS_ORIGINS", "http://localhost:4200").split(",") if o.strip()]

# OpenAI completions
DEFAULT_MODEL = "text-davinci-003"
DEFAULT_BASE_URL = "https://api.openai.com"
DEFAULT_MAX_TOKENS = 150
DEFAULT_TEMPERATURE = 0.5
DEFAULT_TIMEOUT_SEC = 60

# 키가 "설정된 것처럼" 보이지만 실제로는 미설정인 값들
PLACEHOLDER_API_KEYS = {
    "dummy_key_until_configured",
    "your_openai_api_key",
    "changeme",
    "none",
    "null",
}


def is_placeholder_key(api_key: Optional[str]) -> bool:
    if api_key is None:
        return True
    key = api_key.strip()
    return not key or key.lower() in PLACEHOLDER_API_KEYS


@dataclass(frozen=True)
class ProviderConfig:
    api_key: Optional[str] = None
    model: str = DEFAULT_MODEL
    base_url: str = DEFAULT_BASE_URL
    max_tokens: int = DEFAULT_MAX_TOKENS
    temperature: float = DEFAULT_TEMPERATURE
    timeout_sec: int = DEFAULT_TIMEOUT_SEC

    @property
    def is_configured(self) -> bool:
        return not is_placeholder_key(self.api_key)


def load_provider_config() -> ProviderConfig:
    return ProviderConfig(
        api_key=os.environ.get("OPENAI_API_KEY"),
        model=os.environ.get("OPENAI_MODEL", DEFAULT_MODEL),
        base_url=os.environ.get("OPENAI_BASE_URL", DEFAULT_BASE_URL).rstrip("/"),
        max_tokens=int(os.environ.get("OPENAI_MAX_TOKENS", DEFAULT_MAX_TOKENS)),
        temperature=float(os.environ.get("OPENAI_TEMPERATURE", DEFAULT_TEMPERATURE)),
        timeout_sec=int(os.environ.get("OPENAI_TIMEOUT_SEC", DEFAULT_TIMEOUT_SEC)),
    )
