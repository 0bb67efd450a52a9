from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

ALLOWED_EXTENSION = ".txt"


class RejectionReason(str, Enum):
    NO_FILE_PROVIDED = "File is empty. Please select a .txt file to upload."
    UNSUPPORTED_TYPE = "Invalid file type. Only .txt files are allowed."
    BLANK_CONTENT = "File content is empty or whitespace only."

    @property
    def message(self) -> str:
        return self.value


@dataclass(frozen=True)
class UploadedFile:
    name: Optional[str]
    raw: Optional[bytes]


@dataclass(frozen=True)
class Accepted:
    text: str


@dataclass(frozen=True)
class Rejected:
    reason: RejectionReason


ValidationOutcome = Union[Accepted, Rejected]


def decode_lenient(raw: bytes) -> str:
    # 깨진 바이트는 U+FFFD로 치환, 원문(BOM 포함)은 그대로 유지
    return raw.decode("utf-8", errors="replace")


def has_txt_extension(filename: Optional[str]) -> bool:
    return (filename or "").lower().endswith(ALLOWED_EXTENSION)


def validate_upload(file: Optional[UploadedFile]) -> ValidationOutcome:
    """
    업로드된 파일을 순서대로 검사하고, 처음 실패한 규칙의 사유를 반환합니다.
    통과하면 디코딩된 원문 전체(trim 하지 않음)를 돌려줍니다.
    """
    if file is None or not file.raw:
        return Rejected(RejectionReason.NO_FILE_PROVIDED)

    if not has_txt_extension(file.name):
        return Rejected(RejectionReason.UNSUPPORTED_TYPE)

    text = decode_lenient(file.raw)
    if not text.strip():
        return Rejected(RejectionReason.BLANK_CONTENT)

    return Accepted(text)
