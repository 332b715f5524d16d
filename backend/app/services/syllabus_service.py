# app/services/syllabus_service.py
"""
syllabus_service.py
- Purpose: Turn an uploaded syllabus file into structured SyllabusData.
- Extraction and parsing are blocking; they run in the threadpool.
"""

import logging

from fastapi import UploadFile
from starlette.concurrency import run_in_threadpool

from app.schemas.syllabus_schema import SyllabusData
from app.syllabus.extract import extract_syllabus_text
from app.syllabus.parse import extract_syllabus_units
from app.validations.file_validators import validate_syllabus_upload, validate_upload_size

logger = logging.getLogger("app.syllabus_service")


class SyllabusService:
    def __init__(self, max_bytes: int):
        self.max_bytes = max_bytes

    async def parse_upload(self, file: UploadFile) -> SyllabusData:
        content_type = validate_syllabus_upload(file)

        data = await file.read()
        validate_upload_size(data, self.max_bytes)

        extracted = await run_in_threadpool(extract_syllabus_text, data, content_type)
        syllabus = await run_in_threadpool(extract_syllabus_units, extracted.text)

        logger.info(
            "syllabus.parsed",
            extra={
                "upload_filename": file.filename,
                "content_type": content_type,
                "bytes": len(data),
                "strategy": extracted.strategy,
                "units": len(syllabus.units),
            },
        )
        return syllabus
