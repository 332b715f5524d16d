from fastapi import APIRouter

router = APIRouter(prefix="/api", tags=["Root"])

@router.get("/")
def root():
    return {"message": "CO-PO-PSO mapping backend running", "docs": "/docs"}
