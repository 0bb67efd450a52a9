# openai_client.py
"""
OpenAI completions API를 호출하는 얇은 래퍼입니다.
요약 서비스는 CompletionProvider 인터페이스(complete 하나)에만 의존하므로
테스트에서는 네트워크 없이 다른 구현으로 바꿔 끼울 수 있습니다.
"""

from typing import Any, Dict, Optional, Protocol

import httpx

from file_summarizer.core.config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT_SEC

_client: Optional[httpx.AsyncClient] = None


class CompletionError(Exception):
    """Raised when the completion provider cannot produce a completion."""


class CompletionProvider(Protocol):
    async def complete(self, prompt: str, *, model: str, max_tokens: int, temperature: float) -> str:
        ...


def get_client(timeout_sec: int) -> httpx.AsyncClient:
    global _client
    if _client is None:
        _client = httpx.AsyncClient(
            timeout=httpx.Timeout(timeout_sec),
            limits=httpx.Limits(max_connections=20, max_keepalive_connections=20),
        )
    return _client


async def close_client() -> None:
    global _client
    if _client is not None:
        await _client.aclose()
        _client = None


def _error_message(response: httpx.Response) -> str:
    # OpenAI 에러 포맷: {"error": {"message": "...", "type": "..."}}
    try:
        body = response.json()
    except ValueError:
        return response.text
    if isinstance(body, dict) and isinstance(body.get("error"), dict):
        return body["error"].get("message") or response.text
    return response.text


def _first_choice_text(data: Dict[str, Any]) -> str:
    choices = data.get("choices") if isinstance(data, dict) else None
    if not choices or not isinstance(choices[0], dict) or choices[0].get("text") is None:
        raise CompletionError("OpenAI response contained no completion choices")
    return choices[0]["text"]


class OpenAICompletionProvider:
    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout_sec: int = DEFAULT_TIMEOUT_SEC,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout_sec = timeout_sec
        self._client = client

    @property
    def client(self) -> httpx.AsyncClient:
        return self._client or get_client(self.timeout_sec)

    async def complete(self, prompt: str, *, model: str, max_tokens: int, temperature: float) -> str:
        payload = {
            "model": model,
            "prompt": prompt,
            "max_tokens": max_tokens,
            "temperature": temperature,
        }
        headers = {"Authorization": f"Bearer {self.api_key}"}

        try:
            r = await self.client.post(f"{self.base_url}/v1/completions", json=payload, headers=headers)
            r.raise_for_status()
            data = r.json()
        except httpx.TimeoutException:
            raise CompletionError("OpenAI request timed out")
        except httpx.ConnectError:
            raise CompletionError("OpenAI server is not reachable")
        except httpx.HTTPStatusError as e:
            raise CompletionError(f"OpenAI error ({e.response.status_code}): {_error_message(e.response)}")
        except httpx.RequestError as e:
            raise CompletionError(f"OpenAI request failed: {e}")
        except ValueError:
            raise CompletionError("OpenAI returned a malformed response")

        return _first_choice_text(data)
