from playwright.sync_api import Page, expect

from src.errors import CardinalityError
from src.locators import BASKET_LOCATORS
from src.models import ProductSnapshot
from src.selection import element_text
from src.waits import wait_until


class BasketPage:
    def __init__(self, page: Page, timeout: float = 20):
        self.page = page
        self.timeout = timeout

        self._card = BASKET_LOCATORS["card"]
        self._card_name = BASKET_LOCATORS["card_name"]
        self._card_price = BASKET_LOCATORS["card_price"]

    def get_item_count(self) -> int:
        return self.page.locator(self._card).count()

    def get_single_item(self) -> ProductSnapshot:
        """Snapshot of the only line item; fails unless exactly one is present."""
        cards = self.page.locator(self._card)
        wait_until(
            lambda: expect(cards).to_have_count(1, timeout=self.timeout * 1000),
            "one basket item",
        )
        count = cards.count()
        if count != 1:
            raise CardinalityError("basket item", "== 1", count)

        card = cards.first
        return ProductSnapshot(
            name=element_text(card.locator(self._card_name).first),
            price=element_text(card.locator(self._card_price).first),
        )
