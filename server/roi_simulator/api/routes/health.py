from fastapi import APIRouter, Depends

from roi_simulator.core.config import Settings, get_settings


router = APIRouter(tags=["health"])


@router.get("/health")
async def health_endpoint(settings: Settings = Depends(get_settings)) -> dict[str, str]:
    return {
        "status": "ok",
        "environment": settings.environment,
        "scenario_store": settings.scenario_store.value,
    }
