"""
Authentication Use Case DTOs (Data Transfer Objects)

Response classes for the password reset flow.
"""

from pydantic import BaseModel


class RequestPasswordResetResponse(BaseModel):
    """Response for request password reset use case"""

    message: str


class ConfirmPasswordResetResponse(BaseModel):
    """Response for confirm password reset use case"""

    message: str
