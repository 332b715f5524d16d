# app/core/error_codes.py
from enum import Enum

class ErrorCode(str, Enum):
    UNKNOWN = "UNKNOWN"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"

    # Upload / syllabus
    FILE_MISSING = "FILE_MISSING"
    INVALID_FILE_TYPE = "INVALID_FILE_TYPE"
    FILE_TOO_LARGE = "FILE_TOO_LARGE"
    SYLLABUS_EXTRACTION_FAILED = "SYLLABUS_EXTRACTION_FAILED"

    # Reference catalog
    CATALOG_INVALID = "CATALOG_INVALID"

    # Document export
    EXPORT_FAILED = "EXPORT_FAILED"
