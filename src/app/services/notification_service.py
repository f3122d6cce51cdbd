from abc import ABC, abstractmethod


class NotificationError(Exception):
    """Raised when a notification could not be delivered"""


class INotificationService(ABC):
    """Outbound notification sink - application layer"""

    @abstractmethod
    async def send_password_reset(self, email: str, reset_link: str) -> None:
        """
        Deliver the password reset link to the given address.

        Raises:
            NotificationError: delivery failed or the transport is not configured
        """
        pass
