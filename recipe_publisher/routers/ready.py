from fastapi import APIRouter, Depends

from ..deps import get_settings
from ..schemas import ReadyResponse
from ..settings import Settings

router = APIRouter()


@router.get("/ready", response_model=ReadyResponse)
def ready(settings: Settings = Depends(get_settings)):
    return ReadyResponse(store_configured=settings.store_configured)
