from typing import Dict, List

from fastapi import Depends

from tasador.core.config import get_settings
from tasador.services.catalog import load_listings


def get_catalog_path() -> str:
    return get_settings().catalog_path


def get_listings(catalog_path: str = Depends(get_catalog_path)) -> List[Dict]:
    # Re-read on every request so the service always reflects the latest artifact.
    return load_listings(catalog_path)
