"""
API routes for the village catalog
"""
from typing import List

from fastapi import APIRouter, HTTPException

from ..models.scheme import Scheme
from ..models.village import Village
from ..services.catalog_service import catalog_service
from ..services.recommendation_service import get_village_recommendations

router = APIRouter(prefix="/villages", tags=["villages"])


def _get_village_or_404(village_id: str) -> Village:
    village = catalog_service.get_village(village_id)
    if not village:
        raise HTTPException(status_code=404, detail=f"Village not found: {village_id}")
    return village


@router.get("/", response_model=List[Village])
async def get_villages():
    """
    Get all villages for the village selector
    """
    return catalog_service.list_villages()


@router.get("/{village_id}", response_model=Village)
async def get_village(village_id: str):
    """
    Get a specific village profile
    """
    return _get_village_or_404(village_id)


@router.get("/{village_id}/recommendations", response_model=List[Scheme])
async def get_recommendations(village_id: str):
    """
    Get recommended schemes for a village
    """
    village = _get_village_or_404(village_id)
    return get_village_recommendations(village, catalog_service.schemes)
