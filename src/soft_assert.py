from typing import Any, List

from src.errors import SoftAssertionError


class SoftAssertions:
    """
    Collects equality failures and reports them all at once.

    Used as a context manager; leaving the block raises SoftAssertionError
    if any check failed. An exception raised inside the block wins over the
    collected failures.
    """

    def __init__(self):
        self.failures: List[str] = []

    def assert_equal(self, actual: Any, expected: Any, label: str = "value") -> bool:
        if actual == expected:
            return True
        self.failures.append(f"{label}: expected {expected!r}, got {actual!r}")
        return False

    def verify(self):
        if self.failures:
            raise SoftAssertionError(self.failures)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        if exc_type is None:
            self.verify()
        return False
