# prompt_builder.py
"""
요약 요청에 사용하는 고정 지시문과 프롬프트 조립 함수입니다.
"""

SUMMARY_INSTRUCTION = "Summarize the following text concisely:"


def build_summary_prompt(text: str) -> str:
    return f"{SUMMARY_INSTRUCTION}\n\n{text}"


def preview_text(text: str, limit: int = 50) -> str:
    if len(text) <= limit:
        return text
    return text[:limit] + "..."
