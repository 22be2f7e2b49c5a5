import copy

import pytest

from tests.unit.fakes import build_storefront, fake_expect


@pytest.fixture(autouse=True)
def offline_expect(monkeypatch):
    """Route page-object expectations to the fake DOM."""
    for module in ("page_objects.home_page", "page_objects.catalog_page", "page_objects.basket_page"):
        monkeypatch.setattr(f"{module}.expect", fake_expect)


@pytest.fixture
def unit_config(config):
    cfg = copy.deepcopy(config)
    cfg["timeouts"]["page_load"] = 0.05
    return cfg


@pytest.fixture
def storefront():
    return build_storefront()
