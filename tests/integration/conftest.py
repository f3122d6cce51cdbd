from typing import List, Tuple

import pytest
import pytest_asyncio
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession
from tests.fixtures.json_loader import TestDataLoader
from src.depends import get_notification_service, get_unit_of_work
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.services.notification_service import INotificationService, NotificationError
from src.app.services.password_hasher import hash_password
from src.domain.entities import Store


class RecordingNotificationService(INotificationService):
    """Keeps sent reset links in memory instead of emailing them"""

    def __init__(self):
        self.sent: List[Tuple[str, str]] = []
        self.fail = False

    async def send_password_reset(self, email: str, reset_link: str) -> None:
        if self.fail:
            raise NotificationError("delivery failed")
        self.sent.append((email, reset_link))

    @property
    def last_token(self) -> str:
        _, link = self.sent[-1]
        return link.split("token=", 1)[1]


@pytest.fixture
def test_data():
    return TestDataLoader()


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite:///./test.db")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with Session() as session:
        yield session


@pytest_asyncio.fixture
async def store(db_session, test_data):
    data = test_data.get_copy("store")
    store = Store(
        store_name=data["store_name"],
        email=data["email"],
        password_hash=hash_password(data["password"]),
    )
    db_session.add(store)
    await db_session.commit()
    await db_session.refresh(store)
    return store


@pytest.fixture
def notifier():
    return RecordingNotificationService()


@pytest.fixture
def app(db_session, notifier):
    from src.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.dependency_overrides[get_notification_service] = lambda: notifier
    return app


@pytest_asyncio.fixture
async def client(app):
    from httpx import ASGITransport

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
