"""
Use Cases

Organized into domain folders:
- auth/: Password reset flows
"""

from .auth import (
    RequestPasswordResetUseCase,
    ConfirmPasswordResetUseCase,
)

__all__ = [
    # Auth
    "RequestPasswordResetUseCase",
    "ConfirmPasswordResetUseCase",
]
