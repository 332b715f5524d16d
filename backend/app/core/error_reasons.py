"""
error_reasons.py
- Purpose: Human-friendly "reason" strings.
- Keep these stable; they may be surfaced in the UI.
"""

from enum import Enum


class ErrorReason(str, Enum):
    UNKNOWN = "Unknown error"

    INVALID_INPUT = "Invalid input"
    MISSING_FIELDS = "Missing required fields"
    INVALID_COGNITIVE_LEVEL = "Invalid cognitive level"

    FILE_MISSING = "No file uploaded"
    UNSUPPORTED_FILE_TYPE = "Unsupported file type. Please upload PDF, DOCX, or TXT file."
    FILE_TOO_LARGE = "File too large"
    SYLLABUS_UNREADABLE = "Failed to extract text from syllabus"

    CATALOG_INVALID = "Invalid outcome catalog"
    EXPORT_FAILED = "Failed to generate document"
    INTERNAL_ERROR = "Internal server error"
