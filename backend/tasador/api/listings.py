from typing import Dict, List

from fastapi import APIRouter, Depends

from tasador.api.deps import get_listings
from tasador.services.catalog import list_brands, list_models, list_versions

router = APIRouter(prefix="/api", tags=["listings"])


@router.get("/coches")
def all_listings(listings: List[Dict] = Depends(get_listings)) -> List[Dict]:
    return listings


@router.get("/marcas")
def brands(listings: List[Dict] = Depends(get_listings)) -> List[str]:
    return list_brands(listings)


@router.get("/modelos/{marca}")
def models(marca: str, listings: List[Dict] = Depends(get_listings)) -> List[str]:
    return list_models(listings, marca)


@router.get("/versiones/{marca}/{modelo}")
def versions(marca: str, modelo: str, listings: List[Dict] = Depends(get_listings)) -> List[str]:
    return list_versions(listings, marca, modelo)
