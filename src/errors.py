class RozetkaCheckError(Exception):
    """Base class for failures raised by the check suite itself."""


class ElementNotFoundError(RozetkaCheckError, LookupError):
    """No element with the requested text exists in the candidate collection."""

    def __init__(self, target: str, what: str = "Menu item"):
        self.target = target
        super().__init__(f"{what} - {target} is not found")


class CardinalityError(RozetkaCheckError, AssertionError):
    """A collection of elements has the wrong size."""

    def __init__(self, name: str, rule: str, actual: int):
        self.name = name
        self.rule = rule
        self.actual = actual
        super().__init__(f"Expected {name} count {rule}, got {actual}")


class EmptySnapshotError(RozetkaCheckError, ValueError):
    pass


class SoftAssertionError(AssertionError):
    def __init__(self, failures):
        self.failures = list(failures)
        lines = [f"{len(self.failures)} soft assertion(s) failed:"]
        lines += [f"  - {failure}" for failure in self.failures]
        super().__init__("\n".join(lines))
