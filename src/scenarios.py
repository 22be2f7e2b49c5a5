import logging
from typing import Any, Dict, Tuple

from playwright.sync_api import Page

from page_objects.basket_page import BasketPage
from page_objects.catalog_page import CatalogPage
from page_objects.home_page import HomePage
from src.models import ProductSnapshot
from src.soft_assert import SoftAssertions

logger = logging.getLogger(__name__)


class ScenarioRunner:
    """
    Runs the storefront scenarios step by step on a single browser page.

    Every step blocks until Playwright reports it done; the first failing
    step aborts the scenario. Values captured on the way are locals of the
    scenario method, so two scenarios never share state.
    """

    def __init__(self, page: Page, config: Dict[str, Any]):
        self.page = page
        self.config = config

        timeouts = config.get("timeouts", {})
        timeout = float(timeouts.get("page_load", 20))

        self.home = HomePage(page, config["project"]["base_url"], timeout)
        self.catalog = CatalogPage(page, timeout)
        self.basket = BasketPage(page, timeout)

    # ============================================================
    # Check default page layout
    # ============================================================
    def verify_basic_page_view(self):
        expected_search_text = self.config["expectations"]["search_button_text"]

        self.open_home_page()
        self.select_language()

        search_text = self.home.get_search_button_text()
        assert search_text == expected_search_text, (
            f"Expected search button text {expected_search_text!r}, got {search_text!r}"
        )

        badge_text = self.home.get_basket_badge_text()
        assert badge_text == "", f"Expected empty basket badge, got {badge_text!r}"

        assert not self.home.is_private_office_present(), (
            "Private office link is shown for an anonymous user"
        )

    # ============================================================
    # Check user can add any good to basket
    # ============================================================
    def verify_basic_flow(self) -> Tuple[ProductSnapshot, ProductSnapshot]:
        catalog_cfg = self.config["catalog"]

        self.open_home_page()
        self.select_language()

        logger.info("Opening catalog")
        self.home.open_catalog()
        self.catalog.select_category(catalog_cfg["category"])
        self.catalog.select_sub_category(catalog_cfg["sub_category"])

        added = self.catalog.add_first_product_to_basket()

        logger.info("Opening basket")
        self.home.open_basket()
        in_basket = self.basket.get_single_item()

        with SoftAssertions() as softly:
            softly.assert_equal(in_basket.name, added.name, "basket item name")
            softly.assert_equal(in_basket.price, added.price, "basket item price")

        return added, in_basket

    # ------------------------------------------------------------
    # Shared steps
    # ------------------------------------------------------------
    def open_home_page(self):
        self.home.open()

    def select_language(self):
        self.home.select_language(self.config["project"]["language"])
