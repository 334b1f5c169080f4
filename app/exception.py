from enum import Enum
from typing import Optional


class BusinessException(Exception):
    def __init__(self, code: Enum, *, status_code: int = 400, message: Optional[str] = None):
        super().__init__(message or getattr(code, "message", str(code)))
        self.code = code
        self.status_code = status_code
        self.message = message

    @property
    def error_code(self) -> str:
        return getattr(self.code, "code", getattr(self.code, "name", "UNKNOWN"))

    @property
    def error_message(self) -> str:
        return self.message or getattr(self.code, "message", str(self.code))

    def to_dict(self) -> dict:
        body = {
            "error": self.error_message,
        }
        return body


class TranscriptGatewayException(BusinessException):
    def __init__(self, code: Enum, *, status_code: int = 400, message: Optional[str] = None):
        super().__init__(code, status_code=status_code, message=message)
