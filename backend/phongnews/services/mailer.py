"""
Outbound transactional e-mail over SMTP.

smtplib is blocking, so each send runs in a worker thread.
"""
import asyncio
import html
import logging
import smtplib
from email.message import EmailMessage
from typing import Optional

from phongnews.config import Settings
from phongnews.core.errors import MailError

logger = logging.getLogger(__name__)


class Mailer:
    """Sends mail through the configured SMTP relay."""

    def __init__(self, settings: Settings):
        self.settings = settings

    @property
    def configured(self) -> bool:
        return bool(self.settings.smtp_host)

    def build_message(
        self,
        to: str,
        subject: str,
        text: Optional[str] = None,
        html_body: Optional[str] = None,
    ) -> EmailMessage:
        message = EmailMessage()
        message["From"] = self.settings.mail_from
        message["To"] = to
        message["Subject"] = subject
        message.set_content(text or "")
        if html_body:
            message.add_alternative(html_body, subtype="html")
        return message

    async def send(
        self,
        to: Optional[str],
        subject: str,
        text: Optional[str] = None,
        html_body: Optional[str] = None,
    ) -> None:
        """
        Send one message.

        Raises:
            MailError: If the recipient is missing, no relay is configured
                (and MAIL_CONSOLE is off) or the relay fails
        """
        if not to:
            raise MailError("No recipient address")

        message = self.build_message(to, subject, text=text, html_body=html_body)

        if not self.configured:
            if self.settings.mail_console:
                logger.warning("MAIL_CONSOLE set, mail to %s not sent: %s", to, subject)
                logger.info("Unsent mail body:\n%s", message.get_body().get_content())
                return
            logger.error("SMTP_HOST not set, cannot send mail to %s: %s", to, subject)
            raise MailError("SMTP_HOST is not configured")

        await asyncio.to_thread(self._deliver, message)
        logger.info("Mail sent to %s: %s", to, subject)

    def _deliver(self, message: EmailMessage) -> None:
        settings = self.settings
        try:
            with smtplib.SMTP(
                settings.smtp_host,
                settings.smtp_port,
                timeout=settings.smtp_timeout_seconds,
            ) as smtp:
                smtp.ehlo()
                if smtp.has_extn("starttls"):
                    smtp.starttls()
                    smtp.ehlo()
                if settings.smtp_user:
                    smtp.login(settings.smtp_user, settings.smtp_pass or "")
                smtp.send_message(message)
        except (smtplib.SMTPException, OSError) as e:
            logger.exception("SMTP delivery to %s failed", message["To"])
            raise MailError(str(e)) from e


def approval_email(name: str, email: str, approve_url: str) -> tuple[str, str, str]:
    """Subject, text and HTML body of the admin approval request."""
    subject = "Có tài khoản đăng ký mới cần duyệt"
    text = f"{name} ({email})\nDuyệt: {approve_url}"
    url = html.escape(approve_url, quote=True)
    html_body = (
        f"<p>{html.escape(name)} ({html.escape(email)})</p>"
        f'<p>Duyệt: <a href="{url}">{url}</a></p>'
    )
    return subject, text, html_body


def temporary_password_email(temp_password: str) -> tuple[str, str]:
    """Subject and text body carrying a temporary password."""
    return "Mật khẩu tạm thời", f"Mật khẩu tạm: {temp_password}"
