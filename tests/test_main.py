"""애플리케이션 진입점 및 플랜 API 테스트."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.testclient import TestClient

from dateplan.api.dependencies import get_random_source, get_spot_catalog
from dateplan.core.config import get_settings
from dateplan.main import create_app
from dateplan.services.plan_service import NO_SPOTS_MESSAGE
from tests.mocks.fake_random import FixedIndexSource
from tests.mocks.mock_spot_catalog import InMemorySpotCatalog, make_spot

SECRET_HEADERS = {"x-service-secret": "test-service-secret"}

SPOTS = [
    make_spot("1", "ランチ"),
    make_spot("2", "カフェ"),
    make_spot("3", "ランチ,ディナー"),
    make_spot("4", "体験施設", area="渋谷"),
]


def _set_required_env(monkeypatch, **overrides: str) -> None:
    monkeypatch.setenv("SERVICE_SECRET", "test-service-secret")
    monkeypatch.setenv("DATABASE_URL", "sqlite:///:memory:")
    for key, value in overrides.items():
        monkeypatch.setenv(key, value)
    get_settings.cache_clear()


def _build_app(monkeypatch, catalog: InMemorySpotCatalog | None = None, **overrides: str) -> FastAPI:
    _set_required_env(monkeypatch, **overrides)
    app = create_app()
    resolved_catalog = catalog or InMemorySpotCatalog(SPOTS)
    app.dependency_overrides[get_spot_catalog] = lambda: resolved_catalog
    app.dependency_overrides[get_random_source] = lambda: FixedIndexSource(0)
    return app


def _client(monkeypatch, catalog: InMemorySpotCatalog | None = None, **overrides: str) -> TestClient:
    return TestClient(_build_app(monkeypatch, catalog, **overrides))


def test_health_check_endpoint(monkeypatch) -> None:
    client = _client(monkeypatch)
    response = client.get("/")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "message": "Dateplan Server is running"}


def test_readiness_endpoint(monkeypatch) -> None:
    client = _client(monkeypatch)
    response = client.get("/ready")

    assert response.status_code == 200
    assert response.json()["status"] == "ready"


def test_readiness_endpoint_not_ready(monkeypatch) -> None:
    client = _client(monkeypatch, DATABASE_URL="")
    response = client.get("/ready")

    assert response.status_code == 503
    assert response.json()["checks"]["db"]["status"] == "fail"


def test_plan_api_requires_service_secret(monkeypatch) -> None:
    client = _client(monkeypatch)

    assert client.get("/api/v1/areas").status_code == 401
    assert client.get("/api/v1/areas", headers={"x-service-secret": "wrong"}).status_code == 401


def test_list_areas(monkeypatch) -> None:
    client = _client(monkeypatch)
    response = client.get("/api/v1/areas", headers=SECRET_HEADERS)

    assert response.status_code == 200
    assert response.json() == {"areas": sorted(["横浜", "渋谷"])}


def test_area_detail(monkeypatch) -> None:
    client = _client(monkeypatch)
    response = client.get("/api/v1/areas/横浜", headers=SECRET_HEADERS)

    body = response.json()
    assert response.status_code == 200
    assert body["area"] == "横浜"
    assert body["genres"] == sorted(["ランチ", "カフェ", "ディナー"])
    assert [template["id"] for template in body["templates"]] == ["auto"]


def test_list_templates(monkeypatch) -> None:
    client = _client(monkeypatch)
    response = client.get("/api/v1/templates", headers=SECRET_HEADERS)

    ids = [template["id"] for template in response.json()["templates"]]
    assert ids == ["auto", "classic-5", "light-4", "anniversary-5", "xmas-5"]


def test_create_auto_plan(monkeypatch) -> None:
    client = _client(monkeypatch)
    response = client.post("/api/v1/plans", json={"area": "横浜"}, headers=SECRET_HEADERS)

    plan = response.json()["plan"]
    assert response.status_code == 200
    assert plan["template_id"] == "auto"
    assert [item["matched_genre"] for item in plan["items"]] == ["ランチ", "カフェ", "ディナー"]
    assert [item["step_index"] for item in plan["items"]] == [0, 1, 2]
    assert plan["items"][2]["spot"]["id"] == "3"
    assert plan["items"][2]["spot_genres"] == ["ランチ", "ディナー"]
    assert plan["missing_genres"] == []


def test_create_plan_for_empty_area(monkeypatch) -> None:
    client = _client(monkeypatch)
    response = client.post("/api/v1/plans", json={"area": "新宿"}, headers=SECRET_HEADERS)

    assert response.status_code == 200
    assert response.json() == {"plan": None, "message": NO_SPOTS_MESSAGE}


def test_create_template_plan_lenient(monkeypatch) -> None:
    client = _client(monkeypatch, PLAN_TEMPLATE_STRICT_FILTER="false")
    response = client.post(
        "/api/v1/plans",
        json={"area": "横浜", "template_id": "light-4"},
        headers=SECRET_HEADERS,
    )

    plan = response.json()["plan"]
    assert plan["template_id"] == "light-4"
    assert [item["step_index"] for item in plan["items"]] == [0, 2, 3]
    assert plan["missing_genres"] == ["体験施設"]


def test_create_plan_unknown_template(monkeypatch) -> None:
    client = _client(monkeypatch)
    response = client.post(
        "/api/v1/plans",
        json={"area": "横浜", "template_id": "nope"},
        headers=SECRET_HEADERS,
    )

    assert response.status_code == 404


def test_create_plan_validates_max_steps(monkeypatch) -> None:
    client = _client(monkeypatch)
    response = client.post("/api/v1/plans", json={"area": "横浜", "max_steps": 0}, headers=SECRET_HEADERS)

    assert response.status_code == 422


def test_docs_disabled_by_default(monkeypatch) -> None:
    client = _client(monkeypatch)

    assert client.get("/docs").status_code == 404
    assert client.get("/openapi.json").status_code == 404


def test_docs_enabled_by_setting(monkeypatch) -> None:
    client = _client(monkeypatch, DOCS_ENABLED="true")

    assert client.get("/docs").status_code == 200
    assert client.get("/openapi.json").status_code == 200
    assert client.get("/redoc").status_code == 404


def test_security_headers_are_attached(monkeypatch) -> None:
    client = _client(monkeypatch)
    response = client.get("/")

    assert response.headers["x-content-type-options"] == "nosniff"
    assert response.headers["x-frame-options"] == "DENY"
    assert response.headers["referrer-policy"] == "no-referrer"
    assert response.headers["cache-control"] == "no-store"


def test_security_headers_can_be_disabled(monkeypatch) -> None:
    client = _client(monkeypatch, SECURITY_HEADERS_ENABLED="false")
    response = client.get("/")

    assert "x-frame-options" not in response.headers


def test_cors_allowlist_from_env(monkeypatch) -> None:
    client = _client(monkeypatch, CORS_ALLOW_ORIGINS="https://example.com")
    response = client.get("/", headers={"Origin": "https://example.com"})

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "https://example.com"


def test_cors_headers_absent_without_allowlist(monkeypatch) -> None:
    client = _client(monkeypatch)
    response = client.get("/", headers={"Origin": "https://example.com"})

    assert "access-control-allow-origin" not in response.headers


def _add_failing_route(app: FastAPI) -> None:
    @app.get("/boom")
    def boom() -> dict:
        raise RuntimeError("catalog exploded")


def test_unhandled_error_hides_details_by_default(monkeypatch) -> None:
    app = _build_app(monkeypatch)
    _add_failing_route(app)
    response = TestClient(app, raise_server_exceptions=False).get("/boom")

    assert response.status_code == 500
    assert response.json() == {"detail": "내부 서버 오류가 발생했습니다."}


def test_unhandled_error_exposed_when_enabled(monkeypatch) -> None:
    app = _build_app(monkeypatch, EXPOSE_INTERNAL_ERRORS="true")
    _add_failing_route(app)
    response = TestClient(app, raise_server_exceptions=False).get("/boom")

    assert response.status_code == 500
    assert response.json() == {"detail": "catalog exploded"}


class TestAreaFilterPushedToCatalog:
    """지역 단위 엔드포인트는 카탈로그에 지역 필터를 넘긴다."""

    def test_create_plan_requests_only_the_area(self, monkeypatch) -> None:
        catalog = InMemorySpotCatalog(SPOTS)
        client = _client(monkeypatch, catalog)

        client.post("/api/v1/plans", json={"area": "横浜"}, headers=SECRET_HEADERS)

        assert catalog.requested_areas == ["横浜"]

    def test_area_detail_requests_only_the_area(self, monkeypatch) -> None:
        catalog = InMemorySpotCatalog(SPOTS)
        client = _client(monkeypatch, catalog)

        client.get("/api/v1/areas/渋谷", headers=SECRET_HEADERS)

        assert catalog.requested_areas == ["渋谷"]

    def test_area_list_reads_every_spot(self, monkeypatch) -> None:
        catalog = InMemorySpotCatalog(SPOTS)
        client = _client(monkeypatch, catalog)

        client.get("/api/v1/areas", headers=SECRET_HEADERS)

        assert catalog.requested_areas == [None]
