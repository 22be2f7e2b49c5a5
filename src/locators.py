from types import MappingProxyType

# Absolute selectors start with //, relative ones with .// and are resolved
# against a parent locator (a product tile or a basket card).

_BASKET_PATH = "//button[@rzopencart]"

HOME_LOCATORS = MappingProxyType({
    "language_option": "xpath=//li[contains(@class,'lang-header')]",
    "search_button": "xpath=//form[contains(@class,'search-form')]/button[contains(@class,'search-form')]",
    "basket_button": f"xpath={_BASKET_PATH}",
    "basket_badge": f"xpath={_BASKET_PATH}/rz-icon-badge",
    "private_office": "xpath=//rz-user/a",
    "catalog_button": "xpath=//button[contains(@class,'icon menu')]",
})

CATALOG_LOCATORS = MappingProxyType({
    "menu_item": "xpath=//ul[contains(@class,'menu-categories')]/li",
    "sub_menu_item": "xpath=//rz-list-tile//li/a",
    "section_title": "xpath=//h1",
    "product_tile": "xpath=//app-goods-tile-default",
    "tile_name": "xpath=.//a[contains(@class,'goods-tile__heading')]",
    "tile_price": "xpath=.//span[contains(@class,'price-value')]",
    "tile_buy_button": "xpath=.//button[contains(@class,'buy-button')]",
})

BASKET_LOCATORS = MappingProxyType({
    "popup": "xpath=//rz-shopping-cart",
    "card": "xpath=//rz-cart-product",
    "card_name": "xpath=.//a[@data-testid='title']",
    "card_price": "xpath=.//p[contains(@class,'product__price')]",
})

ACTIVE_LANGUAGE_CLASS = "state_active"
