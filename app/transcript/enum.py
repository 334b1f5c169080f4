from enum import Enum
from typing import Optional

from app.constants import TranscriptConfig


class OutputFormat(str, Enum):
    JSON = "json"
    SRT = "srt"
    TEXT = "text"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["OutputFormat"]:
        """대소문자 구분 없이 출력 형식을 해석합니다. 값이 비어 있으면 json, 알 수 없으면 None."""
        normalized = (value or TranscriptConfig.DEFAULT_OUTPUT).lower()
        for output_format in cls:
            if output_format.value == normalized:
                return output_format
        return None
