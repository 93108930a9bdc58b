from unittest.mock import Mock
import pytest
from wrappers.soft_expect import SoftAssertions


class FailingAssertions:
    """Every Playwright assertion fails."""

    def __init__(self, actual):
        self.actual = actual

    def __getattr__(self, item):
        def fail(*args, **kwargs):
            raise AssertionError(f"{item} failed")
        return fail


@pytest.fixture
def pw_expect(monkeypatch):
    """Playwright's expect() replaced with a Mock whose assertions always pass."""
    fake = Mock()
    monkeypatch.setattr("wrappers.soft_expect.pw_expect", fake)
    return fake


@pytest.fixture
def fail_all_expect(monkeypatch, pw_expect):
    """Every Playwright assertion fails, patched over the passing stand-in."""
    monkeypatch.setattr("wrappers.soft_expect.pw_expect", FailingAssertions)


@pytest.fixture
def fail_expect_for(monkeypatch, pw_expect):
    """Make Playwright assertions fail for the given targets only."""
    def apply(*targets):
        monkeypatch.setattr(
            "wrappers.soft_expect.pw_expect",
            lambda actual: FailingAssertions(actual) if any(actual is t for t in targets) else Mock())
    return apply


@pytest.fixture
def soft(pw_expect):
    return SoftAssertions()


@pytest.fixture
def browser_page():
    # Named, so assigning it to the actions stand-in does not record its calls
    page = Mock(name="page")
    page.locator.side_effect = lambda selector: Mock(name=selector, selector=selector)
    return page


@pytest.fixture
def actions(browser_page, soft):
    """PageActions stand-in: records calls, binds real locator registries."""
    actions = Mock()
    actions.page = browser_page
    actions.config = {}
    actions.timeout = 20000
    actions.soft = soft
    actions.register.side_effect = lambda registry_cls: registry_cls(browser_page)
    actions.config_delay.side_effect = lambda key, default: float(actions.config.get(key, default))
    return actions

