import logging
from typing import Callable, Iterable, TypeVar

from playwright.sync_api import Locator

from src.errors import ElementNotFoundError

logger = logging.getLogger(__name__)

T = TypeVar("T")

CENTER_SCROLL_SCRIPT = "el => el.scrollIntoView({block: 'center', inline: 'center'})"


def find_by_text(
    items: Iterable[T],
    target: str,
    text_of: Callable[[T], str] = str,
    what: str = "Menu item",
) -> T:
    """
    Return the first item whose rendered text equals target exactly.

    Raises ElementNotFoundError naming the target when nothing matches.
    """
    for item in items:
        if text_of(item) == target:
            return item
    raise ElementNotFoundError(target, what)


def element_text(element: Locator) -> str:
    """Visible text with surrounding whitespace removed."""
    return (element.inner_text() or "").strip()


def select_by_text(collection: Locator, target: str, what: str = "Menu item") -> Locator:
    """Scroll the matching element to the viewport centre, hover it, click it."""
    element = find_by_text(collection.all(), target, text_of=element_text, what=what)
    logger.info("Selecting %s '%s'", what.lower(), target)

    element.evaluate(CENTER_SCROLL_SCRIPT)
    element.hover()
    element.click()
    return element
