import logging
from typing import Callable

logger = logging.getLogger(__name__)


def wait_until(check: Callable[[], None], description: str = "condition") -> bool:
    """
    Run a Playwright web-first assertion and report whether it held.

    The check carries its own timeout (``expect(...).to_xxx(timeout=ms)``),
    so the deadline is enforced by Playwright. A failed expectation returns
    False; any other error, including a Playwright TimeoutError from an
    action, propagates to the caller.
    """
    try:
        check()
        return True
    except AssertionError as e:
        logger.debug("Gave up waiting for %s: %s", description, e)
        return False
