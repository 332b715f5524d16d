"""
file_validators.py
- Purpose: Centralized validation for syllabus uploads.
- Design: Raise AppError with stable error codes for UI + logs.
"""

from fastapi import UploadFile

from app.core import AppError, ErrorCode, ErrorReason, bad_request
from app.syllabus.types import ALLOWED_CONTENT_TYPES


def validate_syllabus_upload(file: UploadFile | None) -> str:
    """Returns the normalized content type."""
    if file is None or not file.filename:
        raise bad_request(ErrorReason.FILE_MISSING, code=ErrorCode.FILE_MISSING, message="No syllabus file uploaded")

    content_type = (file.content_type or "").split(";")[0].strip().lower()
    if content_type not in ALLOWED_CONTENT_TYPES:
        raise AppError(
            code=ErrorCode.INVALID_FILE_TYPE,
            reason=ErrorReason.UNSUPPORTED_FILE_TYPE.value,
            status_code=415,
            details={"content_type": content_type},
        )
    return content_type


def validate_upload_size(data: bytes, max_bytes: int) -> None:
    if len(data) > max_bytes:
        raise AppError(
            code=ErrorCode.FILE_TOO_LARGE,
            reason=ErrorReason.FILE_TOO_LARGE.value,
            status_code=413,
            details={"max_bytes": max_bytes, "size": len(data)},
        )
