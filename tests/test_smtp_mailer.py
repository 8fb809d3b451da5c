# tests/test_smtp_mailer.py

import smtplib

import pytest

from mail_agent.config import Settings
from mail_agent.infrastructure import smtp_mailer
from mail_agent.infrastructure.smtp_mailer import SmtpMailSender, build_message, format_sender
from mail_agent.ports import MailDeliveryError, OutgoingEmail

EMAIL = OutgoingEmail(
    sender='"AI Agent" <agent@example.com>',
    to="alice@example.com",
    subject="Thank You",
    text="Dear Alice, ...",
)


class _FakeSMTP:
    """Records the SMTP session instead of opening a socket"""

    instances = []

    def __init__(self, host, port, timeout=None, context=None):
        self.host = host
        self.port = port
        self.timeout = timeout
        self.events = []
        self.messages = []
        _FakeSMTP.instances.append(self)

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.events.append("quit")
        return False

    def starttls(self, context=None):
        self.events.append("starttls")

    def login(self, user, password):
        self.events.append(("login", user, password))

    def send_message(self, message):
        self.events.append("send")
        self.messages.append(message)


class _RefusingSMTP(_FakeSMTP):

    def login(self, user, password):
        raise smtplib.SMTPAuthenticationError(535, b"Username and Password not accepted")


@pytest.fixture(autouse=True)
def _reset_fake_smtp():
    _FakeSMTP.instances = []


def test_format_sender_quotes_display_name():
    assert format_sender("AI Agent", "agent@example.com") == "AI Agent <agent@example.com>"
    assert format_sender("Agent, AI", "agent@example.com") == '"Agent, AI" <agent@example.com>'


def test_build_message_is_plain_text():
    message = build_message(EMAIL)

    assert message["From"].addresses[0].display_name == "AI Agent"
    assert message["From"].addresses[0].addr_spec == "agent@example.com"
    assert message["To"] == "alice@example.com"
    assert message["Subject"] == "Thank You"
    assert message.get_content_type() == "text/plain"
    assert message.get_content().strip() == "Dear Alice, ..."


async def test_send_over_implicit_tls(monkeypatch):
    monkeypatch.setattr(smtp_mailer.smtplib, "SMTP_SSL", _FakeSMTP)
    sender = SmtpMailSender("smtp.gmail.com", 465, "agent@example.com", "app-password")

    await sender.send(EMAIL)

    (session,) = _FakeSMTP.instances
    assert (session.host, session.port) == ("smtp.gmail.com", 465)
    assert session.events == [("login", "agent@example.com", "app-password"), "send", "quit"]
    assert session.messages[0]["To"] == "alice@example.com"


async def test_send_with_starttls(monkeypatch):
    monkeypatch.setattr(smtp_mailer.smtplib, "SMTP", _FakeSMTP)
    sender = SmtpMailSender("smtp.example.com", 587, "agent@example.com", "pw", use_ssl=False)

    await sender.send(EMAIL)

    (session,) = _FakeSMTP.instances
    assert session.events[:2] == ["starttls", ("login", "agent@example.com", "pw")]
    assert "send" in session.events


async def test_smtp_failure_becomes_delivery_error(monkeypatch):
    monkeypatch.setattr(smtp_mailer.smtplib, "SMTP_SSL", _RefusingSMTP)
    sender = SmtpMailSender("smtp.gmail.com", 465, "agent@example.com", "wrong")

    with pytest.raises(MailDeliveryError) as exc_info:
        await sender.send(EMAIL)

    assert "Mail delivery failed" in str(exc_info.value)


def test_from_settings():
    settings = Settings(
        email_user="agent@example.com",
        email_pass="pw",
        smtp_host="smtp.example.com",
        smtp_port=2525,
        smtp_use_ssl=False,
    )

    sender = SmtpMailSender.from_settings(settings)

    assert repr(sender) == "<SmtpMailSender host=smtp.example.com:2525>"
