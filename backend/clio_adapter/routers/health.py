from fastapi import APIRouter

from clio_adapter.config import settings

router = APIRouter(tags=["health"])


@router.get("/health")
async def health():
    return {"status": "ok", "region": settings.clio_region}
