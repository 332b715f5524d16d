"""
matrix.py
- Purpose: API routes for generating the CO-PO-PSO matrix and exporting it.
- Design: Keep router thin. Delegate business logic to services.
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import Response
from starlette.concurrency import run_in_threadpool

from app.api.deps import get_matrix_service
from app.core import AppError, ErrorCode, ErrorReason
from app.export.docx_export import export_filename, render_matrix_docx
from app.schemas.matrix_schema import DocxExportRequest, MatrixRequest, MatrixResponse
from app.services.matrix_service import MatrixService

logger = logging.getLogger("app.routers.matrix")

router = APIRouter(prefix="/api", tags=["Matrix"])

DOCX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


@router.post("/generate-matrix", response_model=MatrixResponse)
async def generate_matrix(req: MatrixRequest, svc: MatrixService = Depends(get_matrix_service)):
    return await svc.generate(req)


@router.post("/download-docx")
async def download_docx(req: DocxExportRequest):
    try:
        content = await run_in_threadpool(
            render_matrix_docx, req.matrix_result, req.course_name, req.course_code
        )
    except Exception as e:
        raise AppError(
            code=ErrorCode.EXPORT_FAILED,
            reason=ErrorReason.EXPORT_FAILED.value,
            message=f"Failed to generate DOCX: {e}",
            status_code=500,
        ) from e

    filename = export_filename(req.course_code)
    logger.info("matrix.exported", extra={"export_filename": filename, "bytes": len(content)})
    return Response(
        content=content,
        media_type=DOCX_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
