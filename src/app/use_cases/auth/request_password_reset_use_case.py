"""
Request Password Reset Use Case

Issues a reset token for a store and emails the reset link.
"""

import logging
import secrets
from datetime import datetime

from sqlalchemy.exc import SQLAlchemyError

from src.libs.result import Error, Result, Return
from src.app.services.notification_service import INotificationService, NotificationError
from src.app.services.unit_of_work import UnitOfWork
from src.domain.constants import RESET_TOKEN_BYTES, RESET_TOKEN_TTL
from .dtos import RequestPasswordResetResponse

logger = logging.getLogger(__name__)


class RequestPasswordResetUseCase:
    """
    Use case for requesting password reset.

    Business Rules:
    - Email is trimmed and lower-cased before lookup
    - Unknown email is reported as ACCOUNT_NOT_FOUND
    - Token is 32 cryptographically secure random bytes, hex encoded (64 chars)
    - Token expires in 2 hours
    - A new token replaces any pending one for the store
    - Email is sent only after the token is committed; delivery failure
      is logged and does not fail the request
    """

    def __init__(
        self,
        uow: UnitOfWork,
        notification_service: INotificationService,
        reset_base_url: str,
    ):
        self.uow = uow
        self.notification_service = notification_service
        self.reset_base_url = reset_base_url.rstrip("/")

    def build_reset_link(self, token: str) -> str:
        return f"{self.reset_base_url}/reset-password?token={token}"

    async def execute(self, email: str) -> Result[RequestPasswordResetResponse]:
        """
        Execute request password reset use case.

        Args:
            email: Store's email address (any casing, surrounding spaces allowed)

        Returns:
            Result with confirmation message, or Error

        Errors:
            - VALIDATION_ERROR: Email missing or empty
            - ACCOUNT_NOT_FOUND: No store with this email
            - PERSISTENCE_ERROR: Token could not be stored
        """
        if not isinstance(email, str) or not email.strip():
            return Return.err(Error("VALIDATION_ERROR", "Valid email is required"))

        normalized_email = email.strip().lower()

        async with self.uow:
            try:
                store = await self.uow.stores.get_by_email(normalized_email)
            except SQLAlchemyError:
                logger.exception("Store lookup failed")
                store = None

            if store is None:
                return Return.err(Error("ACCOUNT_NOT_FOUND", "Store not found"))

            reset_token = secrets.token_hex(RESET_TOKEN_BYTES)
            token_expiry = datetime.utcnow() + RESET_TOKEN_TTL

            try:
                updated = await self.uow.stores.set_reset_token(
                    store.id, reset_token, token_expiry
                )
                if not updated:
                    return Return.err(
                        Error("PERSISTENCE_ERROR", "Error setting reset token")
                    )
                await self.uow.commit()
            except SQLAlchemyError:
                logger.exception("Failed to store reset token for store %s", store.id)
                return Return.err(Error("PERSISTENCE_ERROR", "Error setting reset token"))

        # Token is durable from here on; the email is best effort
        try:
            await self.notification_service.send_password_reset(
                normalized_email, self.build_reset_link(reset_token)
            )
        except NotificationError as e:
            logger.error("Password reset email for store %s failed: %s", store.id, e)

        return Return.ok(RequestPasswordResetResponse(message="Reset link sent to email!"))
