import logging
import re

from playwright.sync_api import Page, expect

from src.errors import CardinalityError
from src.locators import ACTIVE_LANGUAGE_CLASS, BASKET_LOCATORS, CATALOG_LOCATORS, HOME_LOCATORS
from src.selection import select_by_text
from src.waits import wait_until

logger = logging.getLogger(__name__)


class HomePage:
    def __init__(self, page: Page, base_url: str, timeout: float = 20):
        self.page = page
        self.base_url = base_url
        self.timeout = timeout

        self._language_option = HOME_LOCATORS["language_option"]
        self._search_button = HOME_LOCATORS["search_button"]
        self._basket_button = HOME_LOCATORS["basket_button"]
        self._basket_badge = HOME_LOCATORS["basket_badge"]
        self._private_office = HOME_LOCATORS["private_office"]
        self._catalog_button = HOME_LOCATORS["catalog_button"]
        self._catalog_menu = CATALOG_LOCATORS["menu_item"]
        self._basket_popup = BASKET_LOCATORS["popup"]

    @property
    def _timeout_ms(self) -> float:
        return self.timeout * 1000

    def open(self):
        logger.info("Opening %s", self.base_url)
        self.page.goto(self.base_url)

    def select_language(self, language: str):
        options = self.page.locator(self._language_option)
        wait_until(
            lambda: expect(options.nth(1)).to_be_attached(timeout=self._timeout_ms),
            "language options",
        )
        count = options.count()
        if count <= 1:
            raise CardinalityError("language option", "> 1", count)

        chosen = select_by_text(options, language, what="Language")
        expect(chosen).to_have_class(re.compile(ACTIVE_LANGUAGE_CLASS), timeout=self._timeout_ms)

    def get_search_button_text(self) -> str:
        button = self.page.locator(self._search_button).first
        button.wait_for(state="visible", timeout=self._timeout_ms)
        return button.inner_text().strip()

    def get_basket_badge_text(self) -> str:
        badge = self.page.locator(self._basket_badge)
        # no badge is rendered while the basket is empty
        if badge.count() == 0:
            return ""
        return badge.first.inner_text().strip()

    def is_private_office_present(self) -> bool:
        return self.page.locator(self._private_office).count() > 0

    def open_catalog(self):
        self._open_panel(self._catalog_button, self._catalog_menu, "Catalog menu")

    def open_basket(self):
        self._open_panel(self._basket_button, self._basket_popup, "Basket popup")

    def _open_panel(self, trigger_selector: str, panel_selector: str, name: str):
        trigger = self.page.locator(trigger_selector).first
        trigger.wait_for(state="visible", timeout=self._timeout_ms)
        trigger.click()

        panel = self.page.locator(panel_selector).first
        panel.wait_for(state="visible", timeout=self._timeout_ms)
        assert panel.is_visible(), f"{name} is not displayed"
