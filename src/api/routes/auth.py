from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, ConfigDict, Field

from src.api.error import ClientError, ServerError
from src.app.services.notification_service import INotificationService
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import (
    RequestPasswordResetUseCase,
    ConfirmPasswordResetUseCase,
    RequestPasswordResetResponse,
    ConfirmPasswordResetResponse,
)
from src.depends import get_notification_service, get_reset_base_url, get_unit_of_work

router = APIRouter()


class ForgotPasswordRequest(BaseModel):
    """
    Forgot password HTTP request payload

    Emptiness and normalization are checked by the use case.
    """

    email: str = Field(..., description="Store email address")


@router.post("/forgot-password", status_code=status.HTTP_200_OK, response_model=RequestPasswordResetResponse)
async def forgot_password(
    request: ForgotPasswordRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    notification_service: INotificationService = Depends(get_notification_service),
    reset_base_url: str = Depends(get_reset_base_url),
):
    """
    Request Password Reset

    Generates a reset token valid for 2 hours and emails the reset link.
    Email delivery is best effort: the request succeeds once the token is stored.

    Raises:
        - 400 Bad Request: Missing or empty email
        - 404 Not Found: No store with this email
        - 500 Internal Server Error: Token could not be stored
    """
    use_case = RequestPasswordResetUseCase(uow, notification_service, reset_base_url)
    result = await use_case.execute(request.email)

    # Handle errors
    if result.is_err():
        error = result.error
        if error.code == "VALIDATION_ERROR":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        elif error.code == "ACCOUNT_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value


class ResetPasswordRequest(BaseModel):
    """
    Reset password HTTP request payload
    """

    model_config = ConfigDict(populate_by_name=True)

    token: str = Field(..., description="Password reset token from email")
    new_password: str = Field(..., alias="newPassword", description="New password (min 6 chars)")


@router.post("/reset-password", status_code=status.HTTP_200_OK, response_model=ConfirmPasswordResetResponse)
async def reset_password(request: ResetPasswordRequest, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Confirm Password Reset

    Validates the reset token and installs the new password.
    The token cannot be used again afterwards.

    Raises:
        - 400 Bad Request: Invalid input, or invalid/expired token
        - 500 Internal Server Error: Password could not be updated
    """
    use_case = ConfirmPasswordResetUseCase(uow)
    result = await use_case.execute(request.token, request.new_password)

    # Handle errors
    if result.is_err():
        error = result.error
        if error.code in ("VALIDATION_ERROR", "INVALID_OR_EXPIRED_TOKEN"):
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    return result.value
