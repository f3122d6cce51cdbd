from typing import AsyncIterator

from fastapi import Request

from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.services.notification_service import INotificationService
from src.app.services.unit_of_work import UnitOfWork


async def get_unit_of_work(request: Request) -> AsyncIterator[UnitOfWork]:
    async with request.app.state.session_factory() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_notification_service(request: Request) -> INotificationService:
    return request.app.state.notification_service


def get_reset_base_url(request: Request) -> str:
    return request.app.state.config.RESET_BASE_URL
