# summarizer.py
"""
검증을 통과한 텍스트를 completion provider에 넘겨 요약을 받아오는 서비스입니다.

- API 키가 없거나 placeholder 값이면 네트워크 호출 없이 안내 문구를 요약 자리에 돌려줍니다.
- provider 호출은 1회만 시도하며, 실패하면 예외 대신 Failure 결과를 반환합니다.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Union

from file_summarizer.core.config import ProviderConfig
from file_summarizer.services.openai_client import CompletionProvider, OpenAICompletionProvider
from file_summarizer.services.prompt_builder import build_summary_prompt, preview_text

logger = logging.getLogger(__name__)

NOT_CONFIGURED_PREFIX = "[Summary generation skipped: OpenAI API key not configured] Placeholder for: "
FAILURE_PREFIX = "Error during summarization: "


@dataclass(frozen=True)
class Summary:
    text: str


@dataclass(frozen=True)
class Failure:
    detail: str

    @property
    def message(self) -> str:
        return FAILURE_PREFIX + self.detail


SummarizationResult = Union[Summary, Failure]


class SummarizationClient:
    def __init__(self, config: ProviderConfig, provider: Optional[CompletionProvider] = None):
        self.config = config
        self.configured = config.is_configured
        if self.configured and provider is None:
            provider = OpenAICompletionProvider(
                api_key=config.api_key,
                base_url=config.base_url,
                timeout_sec=config.timeout_sec,
            )
        self.provider = provider

    async def summarize(self, text: str) -> SummarizationResult:
        if not self.configured:
            logger.warning("OPENAI_API_KEY is not configured; returning placeholder summary")
            return Summary(NOT_CONFIGURED_PREFIX + preview_text(text))

        prompt = build_summary_prompt(text)
        try:
            completion = await self.provider.complete(
                prompt,
                model=self.config.model,
                max_tokens=self.config.max_tokens,
                temperature=self.config.temperature,
            )
        except Exception as e:
            logger.error("summarization failed: %s", e)
            return Failure(str(e) or type(e).__name__)

        return Summary(completion.strip())
