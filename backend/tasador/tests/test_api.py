from fastapi import FastAPI
from fastapi.testclient import TestClient

from tasador.api import appraisal
from tasador.api.deps import get_catalog_path
from tasador.core.config import Settings
from tasador.main import app, configure_cors

from conftest import LISTINGS


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_get_all_listings(client):
    response = client.get("/api/coches")
    assert response.status_code == 200
    assert response.json() == LISTINGS


def test_get_brands(client):
    assert client.get("/api/marcas").json() == ["SEAT", "MERCEDES BENZ"]


def test_get_models_for_brand(client):
    assert client.get("/api/modelos/SEAT").json() == ["LEON", "IBIZA"]
    assert client.get("/api/modelos/MERCEDES BENZ").json() == ["C220"]


def test_get_versions_for_brand_and_model(client):
    assert client.get("/api/versiones/SEAT/LEON").json() == ["1.5 EcoBoost", "FR"]


def test_lookups_return_empty_lists_for_unknown_values(client):
    response = client.get("/api/modelos/DACIA")
    assert response.status_code == 200
    assert response.json() == []
    assert client.get("/api/versiones/SEAT/ARONA").json() == []


def test_catalog_is_reloaded_on_every_request(client, catalog_path):
    assert client.get("/api/marcas").json() == ["SEAT", "MERCEDES BENZ"]
    catalog_path.write_text('[{"marca": "DACIA", "modelo": "SANDERO", "version": ""}]', encoding="utf-8")
    assert client.get("/api/marcas").json() == ["DACIA"]


def test_appraisal_returns_estimate_and_reference(client):
    body = {"marca": "SEAT", "modelo": "LEON", "año": 2018, "kilometros": 50000, "combustible": "diesel"}

    response = client.post("/api/tasacion", json=body)

    assert response.status_code == 200
    payload = response.json()
    assert payload["tasacion"] == 11400
    assert payload["detalles"] == body
    assert payload["coche_similar"] == LISTINGS[0]


def test_appraisal_missing_field_does_not_read_catalog(tmp_path):
    app.dependency_overrides[get_catalog_path] = lambda: str(tmp_path / "does-not-exist.json")
    try:
        with TestClient(app) as test_client:
            response = test_client.post(
                "/api/tasacion", json={"marca": "SEAT", "modelo": "LEON", "año": 2018, "combustible": "diesel"}
            )
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 400
    assert response.json() == {"error": "Faltan datos para la tasación."}


def test_appraisal_blank_field_is_missing(client):
    body = {"marca": "", "modelo": "LEON", "año": 2018, "kilometros": 50000, "combustible": "diesel"}
    response = client.post("/api/tasacion", json=body)
    assert response.status_code == 400


def test_appraisal_malformed_number_is_rejected(client):
    body = {"marca": "SEAT", "modelo": "LEON", "año": "dos mil", "kilometros": 50000, "combustible": "diesel"}
    response = client.post("/api/tasacion", json=body)
    assert response.status_code == 400
    assert "error" in response.json()


def test_appraisal_without_comparables(client):
    body = {"marca": "SEAT", "modelo": "ARONA", "año": 2018, "kilometros": 50000, "combustible": "diesel"}
    response = client.post("/api/tasacion", json=body)
    assert response.status_code == 404
    assert response.json() == {"error": "No se encontraron coches similares para tasar."}


def test_missing_catalog_returns_json_error(tmp_path):
    app.dependency_overrides[get_catalog_path] = lambda: str(tmp_path / "does-not-exist.json")
    try:
        with TestClient(app) as test_client:
            response = test_client.get("/api/marcas")
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 500
    assert response.json() == {"error": "No se pudo leer el catálogo de coches."}


def test_appraisal_with_unpriced_reference_returns_422(write_catalog):
    unpriced = dict(LISTINGS[0], precio="a consultar")
    app.dependency_overrides[get_catalog_path] = lambda: str(write_catalog([unpriced]))
    body = {"marca": "SEAT", "modelo": "LEON", "año": 2018, "kilometros": 50000, "combustible": "diesel"}
    try:
        with TestClient(app) as test_client:
            response = test_client.post("/api/tasacion", json=body)
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 422
    assert response.json() == {"error": "El coche de referencia no tiene un precio válido."}


def test_appraisal_without_resolvable_reference_returns_404(client, monkeypatch):
    monkeypatch.setattr("tasador.services.pricing.find_closest_listing", lambda listings, year, mileage: None)
    body = {"marca": "SEAT", "modelo": "LEON", "año": 2018, "kilometros": 50000, "combustible": "diesel"}

    response = client.post("/api/tasacion", json=body)

    assert response.status_code == 404
    assert response.json() == {"error": "No se pudo encontrar un coche similar para tasar."}


def test_unexpected_errors_return_json_500(catalog_path, monkeypatch):
    def broken_appraise(listings, payload):
        raise RuntimeError("boom")

    monkeypatch.setattr(appraisal, "appraise", broken_appraise)
    app.dependency_overrides[get_catalog_path] = lambda: str(catalog_path)
    body = {"marca": "SEAT", "modelo": "LEON", "año": 2018, "kilometros": 50000, "combustible": "diesel"}
    try:
        with TestClient(app, raise_server_exceptions=False) as test_client:
            response = test_client.post("/api/tasacion", json=body)
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 500
    assert response.json() == {"error": "Error interno del servidor."}


def test_default_cors_allows_any_origin(client):
    response = client.get("/health", headers={"Origin": "http://front.example"})
    assert response.headers["access-control-allow-origin"] in ("*", "http://front.example")


def test_cors_origins_come_from_settings():
    application = FastAPI()
    configure_cors(application, Settings(cors_origins="http://front.example, http://admin.example"))

    @application.get("/ping")
    def ping() -> dict:
        return {"ok": True}

    test_client = TestClient(application)
    allowed = test_client.get("/ping", headers={"Origin": "http://admin.example"})
    blocked = test_client.get("/ping", headers={"Origin": "http://evil.example"})

    assert allowed.headers["access-control-allow-origin"] == "http://admin.example"
    assert "access-control-allow-origin" not in blocked.headers
