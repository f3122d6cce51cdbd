"""
SMTP notification service.

Sends password reset emails through the configured SMTP server. smtplib is
blocking, so each send runs in a worker thread.
"""

import asyncio
import logging
import smtplib
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from typing import Optional

from src.app.services.notification_service import INotificationService, NotificationError

logger = logging.getLogger(__name__)


class SmtpNotificationService(INotificationService):
    """INotificationService implementation using smtplib"""

    def __init__(
        self,
        host: Optional[str],
        port: int,
        username: Optional[str],
        password: Optional[str],
        from_name: str,
        use_ssl: bool = True,
        timeout: float = 10.0,
    ):
        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.from_name = from_name
        self.use_ssl = use_ssl
        self.timeout = timeout

    @classmethod
    def from_config(cls, config) -> "SmtpNotificationService":
        return cls(
            host=config.SMTP_HOST,
            port=config.SMTP_PORT,
            username=config.SMTP_USERNAME,
            password=config.SMTP_PASSWORD,
            from_name=config.EMAIL_FROM_NAME,
            use_ssl=config.SMTP_USE_SSL,
            timeout=config.SMTP_TIMEOUT,
        )

    def build_password_reset_message(self, email: str, reset_link: str) -> MIMEMultipart:
        text_body = (
            "Hello! You requested a password reset.\n\n"
            f"Click here to reset it:\n{reset_link}\n\n"
            "If you did not request this, please ignore this email."
        )
        html_body = f"""
        <p>Dear {self.from_name} Partner,</p>
        <p>You requested a password reset.</p>
        <p><a href="{reset_link}">Click here to reset it</a></p>
        <p>If you did not request this, please ignore this email.</p>
        """

        msg = MIMEMultipart("alternative")
        msg["Subject"] = "Reset Your Password"
        msg["From"] = f"{self.from_name} <{self.username}>"
        msg["To"] = email
        msg.attach(MIMEText(text_body, "plain"))
        msg.attach(MIMEText(html_body, "html"))
        return msg

    def _send(self, email: str, msg: MIMEMultipart) -> None:
        if self.use_ssl:
            server = smtplib.SMTP_SSL(self.host, self.port, timeout=self.timeout)
        else:
            server = smtplib.SMTP(self.host, self.port, timeout=self.timeout)

        with server:
            if not self.use_ssl:
                server.ehlo()
                server.starttls()
                server.ehlo()
            server.login(self.username, self.password)
            server.sendmail(self.username, email, msg.as_string())

    async def send_password_reset(self, email: str, reset_link: str) -> None:
        if not self.host or not self.username:
            logger.warning("SMTP not configured - skipping password reset email")
            raise NotificationError("SMTP is not configured")

        try:
            msg = self.build_password_reset_message(email, reset_link)
            await asyncio.to_thread(self._send, email, msg)
        except Exception as e:
            raise NotificationError(f"Failed to send password reset email: {e}") from e

        logger.info("Password reset email sent")
