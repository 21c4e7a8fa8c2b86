import json

import pytest
from fastapi.testclient import TestClient

from tasador.api.deps import get_catalog_path
from tasador.main import app

LISTINGS = [
    {
        "name": "SEAT LEON 1.5 ECOBOOST",
        "marca": "SEAT",
        "modelo": "LEON",
        "version": "1.5 EcoBoost",
        "combustible": "diesel",
        "año": 2018,
        "kilometros": "50.000 km",
        "precio": "12.000€",
    },
    {
        "name": "SEAT LEON FR",
        "marca": "SEAT",
        "modelo": "LEON",
        "version": "FR",
        "combustible": "gasolina",
        "año": 2020,
        "kilometros": "20.000 km",
        "precio": "18.500€",
    },
    {
        "name": "SEAT IBIZA FR",
        "marca": "SEAT",
        "modelo": "IBIZA",
        "version": "FR",
        "combustible": "gasolina",
        "año": 2019,
        "kilometros": "35.000 km",
        "precio": "11.000€",
    },
    {
        "name": "MERCEDES-BENZ C220 BLUEDCI",
        "marca": "MERCEDES BENZ",
        "modelo": "C220",
        "version": "BlueDCI",
        "combustible": "diesel",
        "año": 2017,
        "kilometros": "90.000 km",
        "precio": "21.000€",
    },
]


@pytest.fixture
def write_catalog(tmp_path):
    def _write(listings, name="processedCars.json"):
        path = tmp_path / name
        path.write_text(json.dumps(listings, ensure_ascii=False), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def catalog_path(write_catalog):
    return write_catalog(LISTINGS)


@pytest.fixture
def client(catalog_path):
    app.dependency_overrides[get_catalog_path] = lambda: str(catalog_path)
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
