import logging

import pytest
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from src.waits import wait_until
from tests.unit.fakes import FakeElement, FakePage, fake_expect


def test_returns_true_when_expectation_holds():
    page = FakePage({"h1": [FakeElement("Матраци")]})

    assert wait_until(lambda: fake_expect(page.locator("h1")).to_have_text("Матраци", timeout=50)) is True


def test_failed_expectation_returns_false_and_logs(caplog):
    page = FakePage({"h1": [FakeElement("ROZETKA")]})

    with caplog.at_level(logging.DEBUG, logger="src.waits"):
        held = wait_until(
            lambda: fake_expect(page.locator("h1")).to_have_text("Матраци", timeout=20),
            "title",
        )

    assert held is False
    assert "Gave up waiting for title" in caplog.text


def test_action_timeout_is_not_swallowed():
    def check():
        raise PlaywrightTimeoutError("locator.click: Timeout 10000ms exceeded")

    with pytest.raises(PlaywrightTimeoutError):
        wait_until(check)


def test_other_errors_propagate():
    def check():
        raise RuntimeError("browser crashed")

    with pytest.raises(RuntimeError, match="browser crashed"):
        wait_until(check)
