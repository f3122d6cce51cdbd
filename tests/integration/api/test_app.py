"""
Integration tests for app wiring: health check and error rendering
"""
from unittest.mock import AsyncMock, MagicMock

import pytest
from httpx import AsyncClient
from sqlalchemy.exc import OperationalError

from src.depends import get_unit_of_work


def failing_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()
    uow.stores.get_by_email = AsyncMock(return_value=MagicMock(id="store-1"))
    uow.stores.set_reset_token = AsyncMock(
        side_effect=OperationalError("UPDATE", {}, Exception("connection reset"))
    )
    uow.stores.get_by_reset_token = AsyncMock(
        side_effect=OperationalError("SELECT", {}, Exception("connection reset"))
    )
    return uow


@pytest.mark.asyncio
async def test_health_check(client: AsyncClient):
    response = await client.get("/")

    assert response.status_code == 200
    assert response.text == "Password reset server running!"


@pytest.mark.asyncio
async def test_persistence_error_is_generic_500(app, client: AsyncClient, notifier):
    uow = failing_uow()
    app.dependency_overrides[get_unit_of_work] = lambda: uow

    response = await client.post("/forgot-password", json={"email": "owner@cornershop.com"})

    assert response.status_code == 500
    assert response.json() == {
        "error": {"code": "PERSISTENCE_ERROR", "message": "Internal server error"}
    }
    assert notifier.sent == []


@pytest.mark.asyncio
async def test_reset_lookup_failure_is_generic_500(app, client: AsyncClient):
    uow = failing_uow()
    app.dependency_overrides[get_unit_of_work] = lambda: uow

    response = await client.post(
        "/reset-password", json={"token": "a" * 64, "newPassword": "brandnew"}
    )

    assert response.status_code == 500
    assert response.json()["error"]["message"] == "Internal server error"
