from pathlib import Path
from typing import Iterable, Mapping, Union

from tasador.core.errors import CatalogLoadError
from tasador.services.catalog import load_listings
from tasador.services.normalization import normalize_listing_fields

from .base import BaseConnector


class JsonFileConnector(BaseConnector):
    name = "json_file"

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)

    def fetch_listings(self) -> Iterable[Mapping]:
        for payload in load_listings(self.path):
            yield self.parse_listing(payload)

    def parse_listing(self, payload: Mapping) -> Mapping:
        if not isinstance(payload, Mapping):
            raise CatalogLoadError(f"Registro no válido en {self.path.name}: se esperaba un objeto.")
        name = payload.get("name")
        if name is not None and not isinstance(name, str):
            raise CatalogLoadError(f"Registro no válido en {self.path.name}: \"name\" debe ser texto.")
        return dict(payload)

    def normalize_fields(self, parsed: Mapping) -> Mapping:
        return normalize_listing_fields(parsed)
