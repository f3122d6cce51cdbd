"""
Confirm Password Reset Use Case

Exchanges a reset token for a new password.
"""

import logging
from datetime import datetime

from sqlalchemy.exc import SQLAlchemyError

from src.libs.result import Error, Result, Return
from src.app.services.password_hasher import hash_password
from src.app.services.unit_of_work import UnitOfWork
from src.domain.constants import MIN_PASSWORD_LENGTH
from .dtos import ConfirmPasswordResetResponse

logger = logging.getLogger(__name__)

INVALID_OR_EXPIRED_TOKEN = Error("INVALID_OR_EXPIRED_TOKEN", "Invalid or expired token")


class ConfirmPasswordResetUseCase:
    """
    Use case for confirming password reset.

    Business Rules:
    - New password must be at least 6 characters, no other rule
    - Unknown and expired tokens produce the same error
    - Token is valid only while its expiry is strictly in the future
    - Password hash is installed and the token cleared in one conditional
      update, so a token can be consumed at most once
    - On a failed write the token is left untouched
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    def _validate_input(self, token: str, new_password: str) -> Result[None]:
        if not isinstance(token, str) or not token:
            return Return.err(Error("VALIDATION_ERROR", "Invalid input"))

        if not isinstance(new_password, str) or len(new_password) < MIN_PASSWORD_LENGTH:
            return Return.err(Error("VALIDATION_ERROR", "Invalid input"))

        return Return.ok(None)

    async def execute(self, token: str, new_password: str) -> Result[ConfirmPasswordResetResponse]:
        """
        Execute confirm password reset use case.

        Args:
            token: Password reset token (plain text from email link)
            new_password: New password to set

        Returns:
            Result with confirmation message, or Error

        Errors:
            - VALIDATION_ERROR: Missing token or password too short
            - INVALID_OR_EXPIRED_TOKEN: Token unknown, expired or already used
            - PERSISTENCE_ERROR: Store read or write failed
        """
        validation = self._validate_input(token, new_password)
        if validation.is_err():
            return Return.err(validation.error)

        async with self.uow:
            try:
                store = await self.uow.stores.get_by_reset_token(token)
            except SQLAlchemyError:
                logger.exception("Reset token lookup failed")
                return Return.err(Error("PERSISTENCE_ERROR", "Failed to update password"))

            if store is None:
                return Return.err(INVALID_OR_EXPIRED_TOKEN)

            now = datetime.utcnow()
            if store.token_expiry is None or store.token_expiry <= now:
                return Return.err(INVALID_OR_EXPIRED_TOKEN)

            password_hash = hash_password(new_password)

            try:
                consumed = await self.uow.stores.consume_reset_token(token, password_hash, now)
                if not consumed:
                    # Another request consumed or replaced the token first
                    return Return.err(INVALID_OR_EXPIRED_TOKEN)
                await self.uow.commit()
            except SQLAlchemyError:
                logger.exception("Failed to update password for store %s", store.id)
                await self.uow.rollback()
                return Return.err(Error("PERSISTENCE_ERROR", "Failed to update password"))

        return Return.ok(ConfirmPasswordResetResponse(message="Password successfully reset"))
