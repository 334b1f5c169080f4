from enum import Enum
from typing import Optional

from app.exception import TranscriptGatewayException


class TranscriptErrorCode(Enum):
    MISSING_URL = ("TRANSCRIPT_001", "Missing YouTube URL", 400)
    INVALID_OUTPUT_TYPE = ("TRANSCRIPT_002", "Invalid output type", 400)
    INVALID_URL = ("TRANSCRIPT_003", "Invalid YouTube URL", 500)
    NETWORK_ERROR = ("TRANSCRIPT_004", "Failed to fetch data from YouTube", 500)
    CAPTIONS_NOT_FOUND = ("TRANSCRIPT_005", "No captions found", 500)
    MALFORMED_CAPTION_DATA = ("TRANSCRIPT_006", "Malformed caption data", 500)
    LANGUAGE_CAPTIONS_NOT_FOUND = ("TRANSCRIPT_007", "No English captions found", 500)

    def __init__(self, code: str, message: str, status_code: int):
        self._code = code
        self._message = message
        self._status_code = status_code

    @property
    def code(self) -> str:
        return self._code

    @property
    def message(self) -> str:
        return self._message

    @property
    def status_code(self) -> int:
        return self._status_code


class TranscriptException(TranscriptGatewayException):
    def __init__(self, code: TranscriptErrorCode, message: Optional[str] = None):
        super().__init__(code, status_code=code.status_code, message=message)
        self.code = code
