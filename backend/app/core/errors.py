"""
errors.py
- Purpose: AppError used across services/core for consistent errors.
- Pattern: raise AppError(...) in service/core, handler converts to JSON response.
"""

from dataclasses import dataclass
from typing import Any

from fastapi import status as http_status
from app.core.error_codes import ErrorCode
from app.core.error_reasons import ErrorReason


@dataclass
class AppError(Exception):
    code: ErrorCode
    reason: str
    status_code: int = http_status.HTTP_400_BAD_REQUEST
    details: dict[str, Any] | None = None
    message: str | None = None  # Optional human-readable message

    def __str__(self) -> str:
        return self.message or str(self.reason)

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "error": {
                "code": self.code,
                "reason": self.reason,
                "message": self.message if self.message else self.reason,
            }
        }
        if self.details:
            payload["error"]["details"] = self.details
        return payload


def _reason_text(reason: str) -> str:
    # str() on a str-Enum member yields "ErrorReason.X" on 3.11+
    return reason.value if isinstance(reason, ErrorReason) else str(reason)


# Convenience constructors
def bad_request(reason: str = ErrorReason.INVALID_INPUT, *, code: ErrorCode = ErrorCode.VALIDATION_ERROR, message: str | None = None, details: dict | None = None) -> AppError:
    return AppError(code=code, reason=_reason_text(reason), status_code=http_status.HTTP_400_BAD_REQUEST, message=message, details=details)


def unprocessable(reason: str = ErrorReason.INVALID_INPUT, *, code: ErrorCode = ErrorCode.VALIDATION_ERROR, message: str | None = None, details: dict | None = None) -> AppError:
    return AppError(code=code, reason=_reason_text(reason), status_code=422, message=message, details=details)


def internal_error(reason: str = ErrorReason.UNKNOWN, *, code: ErrorCode = ErrorCode.INTERNAL_ERROR, message: str | None = None, details: dict | None = None) -> AppError:
    return AppError(code=code, reason=_reason_text(reason), status_code=http_status.HTTP_500_INTERNAL_SERVER_ERROR, message=message, details=details)
