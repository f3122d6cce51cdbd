import pytest
from unittest.mock import AsyncMock, MagicMock


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.stores = MagicMock()
    uow.stores.get_by_email = AsyncMock()
    uow.stores.get_by_reset_token = AsyncMock()
    uow.stores.set_reset_token = AsyncMock(return_value=True)
    uow.stores.consume_reset_token = AsyncMock(return_value=True)
    return uow


@pytest.fixture
def mock_notification_service():
    service = MagicMock()
    service.send_password_reset = AsyncMock()
    return service
