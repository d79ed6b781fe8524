from typing import Optional

from fastapi import APIRouter, Depends

from ..catalog import CatalogService
from ..deps import get_catalog
from ..schemas import CatalogIngestIn


router = APIRouter(tags=["catalog"])


@router.get("/catalog")
def public_catalog(catalog: CatalogService = Depends(get_catalog)):
    return catalog.list_items()


@router.get("/admin/catalog")
def admin_catalog(catalog: CatalogService = Depends(get_catalog)):
    return {"items": catalog.list_items()}


@router.post("/admin/catalog")
def ingest_catalog(payload: Optional[CatalogIngestIn] = None, catalog: CatalogService = Depends(get_catalog)):
    payload = payload or CatalogIngestIn()
    return catalog.ingest(payload.items, payload.mode)


@router.delete("/admin/catalog")
def clear_catalog(catalog: CatalogService = Depends(get_catalog)):
    return catalog.clear()
