from typing import Optional
from fastapi import APIRouter, Query
from domain.schemas import CatalogSlice
from infra.catalog.recommendations import catalog_slice

router = APIRouter()


@router.get("/recommendations/details", response_model=CatalogSlice)
async def recommendation_details(type: Optional[str] = Query(default=None)) -> CatalogSlice:
    kind = (type or "").strip().lower()
    return CatalogSlice(type=kind, items=catalog_slice(kind))
