"""HTTP tests for /api/v1 resolution, slug preview and image selection routes."""

from unittest.mock import MagicMock
import uuid

from fastapi.testclient import TestClient
import jwt
import pytest

from fitmarket.api.dependencies.database import get_db
from fitmarket.api.dependencies.services import get_slug_resolution_service
from fitmarket.core.constants import FALLBACK_IMAGE_URLS
from fitmarket.core.enums import ImageKind
from fitmarket.main import app


@pytest.fixture
def client(unit_db):
    def _override_db():
        yield unit_db

    app.dependency_overrides[get_db] = _override_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


class TestResolveEndpoint:
    def test_trainer_slug(self, client, seeded_catalog):
        response = client.get("/api/v1/resolve/ana-costa", params={"expected_type": "trainer"})

        assert response.status_code == 200
        body = response.json()
        assert body["result"]["type"] == "trainer"
        assert body["result"]["id"] == seeded_catalog["trainer"].id
        assert body["canonical_url"] == "/trainers/ana-costa"
        assert body["needs_redirect"] is False
        assert body["redirect_url"] is None
        assert response.headers["Cache-Control"] == "public, max-age=300"

    def test_trainer_uuid_redirects(self, client, seeded_catalog):
        response = client.get(f"/api/v1/resolve/{seeded_catalog['trainer'].id}")

        body = response.json()
        assert response.status_code == 200
        assert body["needs_redirect"] is True
        assert body["redirect_url"] == "/trainers/ana-costa"
        assert body["redirect_reason"] == "uuid_to_slug"

    def test_sport_under_trainer_section(self, client, seeded_catalog):
        response = client.get("/api/v1/resolve/crossfit", params={"expected_type": "trainer"})

        body = response.json()
        assert body["result"]["type"] == "sport"
        assert body["redirect_reason"] == "type_mismatch"
        assert body["redirect_url"] == "/sports/crossfit"

    def test_program_without_slug(self, client, seeded_catalog):
        program_id = seeded_catalog["unslugged"].id
        response = client.get(f"/api/v1/resolve/{program_id}")

        body = response.json()
        assert body["result"]["slug"] == program_id
        assert body["canonical_url"] == f"/programs/{program_id}"
        assert body["needs_redirect"] is False

    def test_legacy_trainer_slug(self, client, seeded_catalog):
        response = client.get("/api/v1/resolve/ana-costa-0badc0de")

        body = response.json()
        assert body["redirect_reason"] == "legacy_slug"
        assert body["redirect_url"] == "/trainers/ana-costa"

    @pytest.mark.parametrize("identifier", ["secret-plan", "bruno-lima", "carla-dias", "nobody"])
    def test_hidden_or_unknown_is_404(self, client, seeded_catalog, identifier):
        response = client.get(f"/api/v1/resolve/{identifier}")

        assert response.status_code == 404
        detail = response.json()["detail"]
        assert detail["code"] == "IDENTIFIER_NOT_FOUND"
        assert detail["details"]["identifier"] == identifier

    def test_unknown_uuid_is_404(self, client, seeded_catalog):
        token = str(uuid.uuid4())
        response = client.get(f"/api/v1/resolve/{token}", params={"expected_type": "program"})

        assert response.status_code == 404
        assert response.json()["detail"]["details"]["expected_type"] == "program"

    def test_invalid_expected_type(self, client):
        response = client.get("/api/v1/resolve/ana-costa", params={"expected_type": "coach"})
        assert response.status_code == 422

    def test_upstream_outage_is_404(self, client):
        service = MagicMock()
        service.resolve_canonical.return_value = None
        app.dependency_overrides[get_slug_resolution_service] = lambda: service

        response = client.get("/api/v1/resolve/ana-costa")

        assert response.status_code == 404
        service.resolve_canonical.assert_called_once_with("ana-costa", None)


class TestSlugPreviewEndpoint:
    def test_preview(self, client):
        response = client.get("/api/v1/slugs/preview", params={"text": "João Silva! #1"})

        assert response.status_code == 200
        assert response.json() == {"text": "João Silva! #1", "slug": "joo-silva-1", "is_valid": True}

    def test_unusable_text(self, client):
        response = client.get("/api/v1/slugs/preview", params={"text": "!!!"})
        assert response.json()["slug"] == ""
        assert response.json()["is_valid"] is False

    def test_text_is_required(self, client):
        assert client.get("/api/v1/slugs/preview").status_code == 422


class TestImageSelectEndpoint:
    def test_picks_first_usable(self, client):
        response = client.post(
            "/api/v1/images/select",
            json={"urls": [None, "", "https://cdn.example.com/a.png"], "kind": "avatar"},
        )

        assert response.status_code == 200
        assert response.json() == {"url": "https://cdn.example.com/a.png", "used_fallback": False}

    def test_expired_storage_url_falls_back(self, client):
        token = jwt.encode(
            {"exp": 1_000_000_000}, "storage-signing-key-used-only-in-unit-tests", algorithm="HS256"
        )
        expired = f"https://abc.supabase.co/storage/v1/object/sign/covers/x.png?token={token}"

        response = client.post("/api/v1/images/select", json={"urls": [expired], "kind": "cover"})

        assert response.json() == {
            "url": FALLBACK_IMAGE_URLS[ImageKind.COVER][0],
            "used_fallback": True,
        }

    def test_unknown_fields_are_rejected(self, client):
        response = client.post("/api/v1/images/select", json={"urls": [], "size": "large"})
        assert response.status_code == 422

    def test_too_many_candidates(self, client):
        response = client.post(
            "/api/v1/images/select", json={"urls": ["https://cdn.example.com/a.png"] * 21}
        )
        assert response.status_code == 422


class TestOperationalEndpoints:
    def test_metrics(self, client, seeded_catalog):
        client.get("/api/v1/resolve/ana-costa")

        response = client.get("/metrics")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        assert "fitmarket_slug_resolutions_total" in response.text
        assert "fitmarket_service_operations_total" in response.text

    def test_health(self, client):
        assert client.get("/health").json()["status"] == "healthy"
