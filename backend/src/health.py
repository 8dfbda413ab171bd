from fastapi import APIRouter

router = APIRouter()

@router.get("/health")
async def health_check():
    """Basic health check without store access"""
    return {
        "status": "ok",
        "service": "billed-employee-api"
    }
