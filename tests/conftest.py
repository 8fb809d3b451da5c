"""
Test configuration for stable local/CI execution.
"""
from __future__ import annotations

import asyncio
import inspect
import os
from typing import List, Optional

import pytest


# Dummy configuration so the app can be imported without a real .env.
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("LOG_DIR", "/tmp/mail-agent-test-logs")
os.environ.setdefault("STATIC_DIR", "/tmp/mail-agent-test-static-missing")
os.environ.setdefault("OPENAI_API_KEY", "sk-test")
os.environ.setdefault("EMAIL_USER", "agent@example.com")
os.environ.setdefault("EMAIL_PASS", "app-password")
os.environ.setdefault("PORT", "8080")

from mail_agent.ports import IntentGenerator, MailSender, OutgoingEmail  # noqa: E402


def pytest_pyfunc_call(pyfuncitem):
    """
    Minimal asyncio runner to support async test functions without extra plugins.
    """
    testfunction = pyfuncitem.obj
    if not inspect.iscoroutinefunction(testfunction):
        return None

    kwargs = {
        argname: pyfuncitem.funcargs[argname]
        for argname in pyfuncitem._fixtureinfo.argnames
    }
    asyncio.run(testfunction(**kwargs))
    return True


class FakeIntentGenerator(IntentGenerator):
    """Returns a canned answer (or raises) and records every prompt"""

    def __init__(self, output: Optional[str] = "", error: Optional[Exception] = None):
        self.output = output
        self.error = error
        self.prompts: List[str] = []

    async def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.output

    def get_model_name(self) -> str:
        return "fake-model"


class FakeMailSender(MailSender):
    """Records sent emails (or raises)"""

    def __init__(self, error: Optional[Exception] = None):
        self.error = error
        self.sent: List[OutgoingEmail] = []

    async def send(self, email: OutgoingEmail) -> None:
        self.sent.append(email)
        if self.error is not None:
            raise self.error


@pytest.fixture
def fake_generator() -> FakeIntentGenerator:
    return FakeIntentGenerator()


@pytest.fixture
def fake_mail_sender() -> FakeMailSender:
    return FakeMailSender()
