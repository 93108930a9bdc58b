import logging
from playwright.sync_api import expect as pw_expect

logger = logging.getLogger(__name__)


class SoftExpect:
    """
    SoftExpect is a wrapper around Playwright's expect() that provides:
    - Transparent proxying of assertion methods (e.g. .to_be_visible(), .to_have_count()).
    - Soft failure: an AssertionError is recorded in the owning SoftAssertions
      instead of aborting the scenario. The call returns False.
    - Other attributes of the underlying assertion object are returned unchanged.
    """

    def __init__(self, actual, collector: "SoftAssertions", message: str = None):
        self._actual = actual
        self._collector = collector
        self._message = message
        self._inner = pw_expect(actual)

    def __getattr__(self, item):
        target = getattr(self._inner, item)

        if callable(target) and item.startswith(("to_", "not_to_")):
            def wrapper(*args, **kwargs):
                try:
                    target(*args, **kwargs)
                    return True
                except AssertionError as e:
                    description = self._message or f"expect({self._actual}).{item}{args}"
                    self._collector.record(f"{description}: {e}")
                    return False
            return wrapper
        return target

    def __dir__(self):
        return dir(self._inner)


class SoftAssertions:
    """
    Collects assertion failures for one scenario.
    Failures are reported together by assert_all() when the scenario ends
    or when the code path needs a hard guarantee to proceed.
    """

    def __init__(self):
        self.errors: list[str] = []

    def record(self, error: str):
        logger.warning("Soft assertion failed: %s", error)
        self.errors.append(error)

    def expect(self, actual, message: str = None) -> SoftExpect:
        return SoftExpect(actual, self, message)

    def check(self, condition, message: str) -> bool:
        if not condition:
            self.record(message)
            return False
        return True

    def equal(self, actual, expected, message: str = None) -> bool:
        description = message or "Values differ"
        return self.check(actual == expected, f"{description}: expected {expected!r}, got {actual!r}")

    def contains(self, text: str, fragment: str, message: str = None) -> bool:
        description = message or "Text does not contain expected fragment"
        return self.check(fragment in (text or ""), f"{description}: {fragment!r} not in {text!r}")

    def has_failures(self) -> bool:
        return bool(self.errors)

    def assert_all(self):
        if not self.errors:
            return

        errors, self.errors = self.errors, []
        details = "\n".join(f"  {i}. {error}" for i, error in enumerate(errors, start=1))
        raise AssertionError(f"{len(errors)} soft assertion(s) failed:\n{details}")

    def __len__(self):
        return len(self.errors)
