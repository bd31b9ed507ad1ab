"""
API routes for browsing the scheme catalog
"""
from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query

from ..models.scheme import Scheme
from ..services.catalog_service import catalog_service

router = APIRouter(prefix="/schemes", tags=["schemes"])


@router.get("/", response_model=List[Scheme])
async def get_schemes(
    category: Optional[str] = Query(None, description="Filter by category"),
    limit: int = Query(100, ge=1, le=1000, description="Maximum number of schemes to return"),
    offset: int = Query(0, ge=0, description="Number of schemes to skip")
):
    """
    Get all schemes with optional filtering
    """
    schemes = catalog_service.list_schemes(category=category)
    return schemes[offset:offset + limit]


@router.get("/search/")
async def search_schemes(
    query: str = Query(..., min_length=1, description="Search query"),
    limit: int = Query(20, ge=1, le=100, description="Maximum number of results")
):
    """
    Search schemes by name or description
    """
    matching_schemes = catalog_service.search_schemes(query, limit=limit)

    return {
        "query": query,
        "total_results": len(matching_schemes),
        "schemes": [scheme.model_dump(by_alias=True) for scheme in matching_schemes]
    }


@router.get("/categories/")
async def get_scheme_categories():
    """
    Get scheme categories with the number of schemes in each
    """
    return {
        "categories": catalog_service.category_counts(),
        "total_schemes": len(catalog_service.schemes)
    }


@router.get("/{scheme_id}", response_model=Scheme)
async def get_scheme(scheme_id: str):
    """
    Get a specific scheme by ID
    """
    scheme = catalog_service.get_scheme(scheme_id)

    if not scheme:
        raise HTTPException(status_code=404, detail=f"Scheme not found: {scheme_id}")

    return scheme
