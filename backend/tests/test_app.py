"""
Schedule API — Application-Level Tests
=======================================

What:  Info and health endpoints, request IDs, error envelope for store
       failures and unexpected errors, and settings validation.
"""

from unittest.mock import AsyncMock, patch

import pytest
from sqlalchemy.exc import OperationalError

from schedule_api.config import Settings
from schedule_api.services.schedule_service import schedule_service


class TestInfoAndHealth:

    @pytest.mark.asyncio
    async def test_root_info(self, test_client):
        response = await test_client.get("/")

        assert response.status_code == 200
        assert response.json() == {"info": "schedule API"}

    @pytest.mark.asyncio
    async def test_health_connected(self, test_client):
        response = await test_client.get("/health")

        body = response.json()
        assert body["status"] == "healthy"
        assert body["database"] == "connected"

    @pytest.mark.asyncio
    async def test_health_disconnected(self, test_client, database):
        with patch.object(database, "ping", AsyncMock(side_effect=OSError("refused"))):
            response = await test_client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "unhealthy"


class TestRequestId:

    @pytest.mark.asyncio
    async def test_generated_request_id(self, test_client):
        response = await test_client.get("/")

        assert len(response.headers["X-Request-ID"]) == 8

    @pytest.mark.asyncio
    async def test_client_request_id_echoed(self, test_client):
        response = await test_client.get("/feedback/999", headers={"X-Request-ID": "abc123"})

        assert response.headers["X-Request-ID"] == "abc123"
        assert response.json()["request_id"] == "abc123"


class TestStoreFailures:

    @pytest.mark.asyncio
    async def test_query_failure_is_500(self, test_client):
        failure = OperationalError("SELECT", {}, Exception("connection lost"))
        with patch(
            "sqlalchemy.ext.asyncio.AsyncSession.execute",
            AsyncMock(side_effect=failure),
        ):
            response = await test_client.get("/schedule/1/1")

        assert response.status_code == 500
        body = response.json()
        assert body["error"] == "query_error"
        assert body["details"] == {"error_type": "OperationalError"}

    @pytest.mark.asyncio
    async def test_add_flush_failure_is_insert_error(self, test_client):
        failure = OperationalError("INSERT", {}, Exception("connection lost"))
        with patch(
            "sqlalchemy.ext.asyncio.AsyncSession.flush",
            AsyncMock(side_effect=failure),
        ):
            response = await test_client.post(
                "/schedule/add", json={"user_id": 1, "semester_id": 1, "course_id": 101}
            )

        assert response.status_code == 500
        body = response.json()
        assert body["error"] == "insert_error"
        assert body["details"] == {"error_type": "OperationalError"}

    @pytest.mark.asyncio
    async def test_add_commit_failure_is_not_reported_as_created(self, test_client):
        failure = OperationalError("COMMIT", {}, Exception("disk I/O error"))
        with patch(
            "sqlalchemy.ext.asyncio.AsyncSession.commit",
            AsyncMock(side_effect=failure),
        ):
            response = await test_client.post(
                "/schedule/add", json={"user_id": 1, "semester_id": 1, "course_id": 101}
            )

        assert response.status_code == 500
        assert response.json()["error"] == "insert_error"

        # The flushed row was rolled back with the failed transaction
        listing = await test_client.get("/schedule/1/1")
        assert listing.json() == []

    @pytest.mark.asyncio
    async def test_remove_failure_is_insert_error(self, test_client):
        failure = OperationalError("DELETE", {}, Exception("database is locked"))
        with patch(
            "sqlalchemy.ext.asyncio.AsyncSession.execute",
            AsyncMock(side_effect=failure),
        ):
            response = await test_client.post(
                "/schedule/remove", json={"user_id": 1, "semester_id": 1, "course_id": 101}
            )

        assert response.status_code == 500
        body = response.json()
        assert body["error"] == "insert_error"
        assert body["details"] == {"error_type": "OperationalError"}

    @pytest.mark.asyncio
    async def test_feedback_flush_failure_is_insert_error(self, test_client):
        failure = OperationalError("INSERT", {}, Exception("connection lost"))
        with patch(
            "sqlalchemy.ext.asyncio.AsyncSession.flush",
            AsyncMock(side_effect=failure),
        ):
            response = await test_client.post("/feedback", json={"content": "great course"})

        assert response.status_code == 500
        body = response.json()
        assert body["error"] == "insert_error"
        assert body["details"] == {"error_type": "OperationalError"}
        assert body["request_id"] == response.headers["X-Request-ID"]

    @pytest.mark.asyncio
    async def test_feedback_commit_failure_is_insert_error(self, test_client):
        failure = OperationalError("COMMIT", {}, Exception("disk I/O error"))
        with patch(
            "sqlalchemy.ext.asyncio.AsyncSession.commit",
            AsyncMock(side_effect=failure),
        ):
            response = await test_client.post("/feedback", json={"content": "great course"})

        assert response.status_code == 500
        assert response.json()["error"] == "insert_error"

        listing = await test_client.get("/feedback")
        assert listing.json() == []


class TestUnexpectedErrors:

    @pytest.mark.asyncio
    async def test_unexpected_error_keeps_request_id(self, test_client):
        with patch.object(
            schedule_service,
            "get_schedule",
            AsyncMock(side_effect=RuntimeError("boom")),
        ):
            response = await test_client.get(
                "/schedule/1/1", headers={"X-Request-ID": "trace-500"}
            )

        assert response.status_code == 500
        assert response.headers["X-Request-ID"] == "trace-500"
        body = response.json()
        assert body["error"] == "internal_server_error"
        assert body["request_id"] == "trace-500"
        assert "boom" not in response.text


class TestSettings:

    def test_port_from_env(self, monkeypatch):
        monkeypatch.setenv("PORT", "8080")

        assert Settings().port == 8080

    def test_default_port(self, monkeypatch):
        monkeypatch.delenv("PORT", raising=False)

        assert Settings(_env_file=None).port == 5000

    def test_log_level_normalized(self):
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_log_level_rejected(self):
        with pytest.raises(ValueError):
            Settings(log_level="LOUD")

    def test_cors_origins_list(self):
        s = Settings(cors_origins="http://a.test, http://b.test")

        assert s.cors_origins_list == ["http://a.test", "http://b.test"]
