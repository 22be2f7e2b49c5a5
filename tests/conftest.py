import os

import pytest
from playwright.sync_api import sync_playwright, Page

from config.config_loader import as_bool, get_config
from src.scenarios import ScenarioRunner

CONFIG = get_config()


def pytest_addoption(parser):
    parser.addoption(
        "--e2e",
        action="store_true",
        default=False,
        help="run scenarios against the live storefront",
    )


def pytest_collection_modifyitems(config, items):
    if config.getoption("--e2e") or as_bool(os.getenv("RUN_E2E")):
        return
    skip_e2e = pytest.mark.skip(reason="live storefront check, use --e2e or RUN_E2E=1")
    for item in items:
        if "e2e" in item.keywords:
            item.add_marker(skip_e2e)


@pytest.fixture(scope="session")
def config():
    return CONFIG


@pytest.fixture(scope="function")
def page(config):
    browser_cfg = config.get("browser", {})
    action_timeout = float(config["timeouts"].get("action", 10)) * 1000

    with sync_playwright() as p:
        browser_type = getattr(p, browser_cfg.get("name") or "chromium")
        browser = browser_type.launch(
            headless=as_bool(browser_cfg.get("headless"), default=True),
            slow_mo=browser_cfg.get("slow_mo") or 0,
        )
        page = browser.new_page()
        page.set_default_timeout(action_timeout)
        yield page
        browser.close()


@pytest.fixture(scope="function")
def scenario(page: Page, config):
    return ScenarioRunner(page, config)


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item):
    outcome = yield
    rep = outcome.get_result()

    if rep.when == "call" and rep.failed:
        page = item.funcargs.get("page")
        if isinstance(page, Page):
            reports_dir = CONFIG["paths"]["reports_dir"]
            os.makedirs(reports_dir, exist_ok=True)
            page.screenshot(path=os.path.join(reports_dir, f"{item.name}.png"))
