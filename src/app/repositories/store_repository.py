from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional
from uuid import UUID

from src.domain.entities import Store


class IStoreRepository(ABC):
    """Store repository interface - application layer"""

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[Store]:
        """Get store by normalized email address"""
        pass

    @abstractmethod
    async def get_by_reset_token(self, token: str) -> Optional[Store]:
        """Get store holding the given pending reset token"""
        pass

    @abstractmethod
    async def set_reset_token(self, store_id: UUID, token: str, expiry: datetime) -> bool:
        """
        Store a reset token on the store, replacing any pending one.

        Returns False if no row was updated.
        """
        pass

    @abstractmethod
    async def consume_reset_token(
        self, token: str, password_hash: str, now: datetime
    ) -> bool:
        """
        Install a new password hash and clear the reset token in one update.

        The update only applies while the token still matches and has not
        expired at `now`. Returns False if no row was updated.
        """
        pass
