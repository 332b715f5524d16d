from fastapi import APIRouter, Depends, File, UploadFile

from app.api.deps import get_syllabus_service
from app.schemas.syllabus_schema import SyllabusUploadResponse
from app.services.syllabus_service import SyllabusService

router = APIRouter(prefix="/api", tags=["Syllabus"])


@router.post("/upload-syllabus", response_model=SyllabusUploadResponse)
async def upload_syllabus(
    syllabus: UploadFile | None = File(None),
    svc: SyllabusService = Depends(get_syllabus_service),
):
    data = await svc.parse_upload(syllabus)
    return SyllabusUploadResponse(success=True, syllabus_data=data)
