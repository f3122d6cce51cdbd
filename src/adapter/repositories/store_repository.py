from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlalchemy import func, update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.store_repository import IStoreRepository
from src.domain.entities import Store


class StoreRepository(IStoreRepository):
    """Store repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_email(self, email: str) -> Optional[Store]:
        """Get store by normalized email address"""
        stmt = select(Store).where(func.lower(Store.email) == email)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_reset_token(self, token: str) -> Optional[Store]:
        """Get store holding the given pending reset token"""
        stmt = select(Store).where(Store.reset_token == token)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def set_reset_token(self, store_id: UUID, token: str, expiry: datetime) -> bool:
        stmt = (
            update(Store)
            .where(Store.id == store_id)
            .values(reset_token=token, token_expiry=expiry)
        )
        result = await self.session.execute(stmt)
        return result.rowcount > 0

    async def consume_reset_token(
        self, token: str, password_hash: str, now: datetime
    ) -> bool:
        # Conditioned on the token, not the id, so racing consumers cannot both win
        stmt = (
            update(Store)
            .where(Store.reset_token == token, Store.token_expiry > now)
            .values(password_hash=password_hash, reset_token=None, token_expiry=None)
        )
        result = await self.session.execute(stmt)
        return result.rowcount > 0
