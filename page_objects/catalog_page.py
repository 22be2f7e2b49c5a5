import logging
from typing import Optional

from playwright.sync_api import Locator, Page, expect

from src.errors import CardinalityError
from src.locators import CATALOG_LOCATORS
from src.models import ProductSnapshot
from src.selection import element_text, select_by_text
from src.waits import wait_until

logger = logging.getLogger(__name__)


class CatalogPage:
    def __init__(self, page: Page, timeout: float = 20):
        self.page = page
        self.timeout = timeout

        self._menu_item = CATALOG_LOCATORS["menu_item"]
        self._sub_menu_item = CATALOG_LOCATORS["sub_menu_item"]
        self._section_title = CATALOG_LOCATORS["section_title"]
        self._product_tile = CATALOG_LOCATORS["product_tile"]
        self._tile_name = CATALOG_LOCATORS["tile_name"]
        self._tile_price = CATALOG_LOCATORS["tile_price"]
        self._tile_buy_button = CATALOG_LOCATORS["tile_buy_button"]

    @property
    def _timeout_ms(self) -> float:
        return self.timeout * 1000

    def select_category(self, category: str):
        self._select_item(self._menu_item, category)

    def select_sub_category(self, sub_category: str):
        self._select_item(self._sub_menu_item, sub_category)

    def _select_item(self, collection_selector: str, item_name: str):
        select_by_text(self.page.locator(collection_selector), item_name)
        self.check_section_title(item_name)

    def get_section_title_text(self) -> Optional[str]:
        """Current title text, or None while no title is rendered."""
        title = self.page.locator(self._section_title)
        if title.count() == 0:
            return None
        return element_text(title.first)

    def check_section_title(self, title_name: str):
        title = self.page.locator(self._section_title).first
        wait_until(
            lambda: expect(title).to_have_text(title_name, timeout=self._timeout_ms),
            f"section title '{title_name}'",
        )

        actual = self.get_section_title_text()
        assert actual == title_name, f"Expected section title {title_name!r}, got {actual!r}"

    def get_first_product(self) -> Locator:
        tiles = self.page.locator(self._product_tile)
        wait_until(
            lambda: expect(tiles.nth(1)).to_be_attached(timeout=self._timeout_ms),
            "more than one product tile",
        )
        count = tiles.count()
        if count <= 1:
            raise CardinalityError("product tile", "> 1", count)
        return tiles.first

    def add_first_product_to_basket(self) -> ProductSnapshot:
        tile = self.get_first_product()
        snapshot = ProductSnapshot(
            name=element_text(tile.locator(self._tile_name).first),
            price=element_text(tile.locator(self._tile_price).first),
        )
        logger.info("Adding '%s' (%s) to basket", snapshot.name, snapshot.price)
        tile.locator(self._tile_buy_button).first.click()
        return snapshot
