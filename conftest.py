import json
import os
import shutil
import time
from pathlib import Path
import pytest
from playwright.sync_api import sync_playwright
from helpers.artifact_helper import artifact_mode, finish_video, start_tracing, stop_tracing, video_options
from helpers.config_helper import resolve_flag
from helpers.screenshot_helper import SCREENSHOT_DIR, take_screenshot
from helpers.test_data_loader import TestDataLoader
from pages.cart_page import CartPage
from pages.checkout_page import CheckoutPage
from pages.home_page import HomePage
from pages.login_page import LoginPage
from pages.product_page import ProductPage
from services.shopping_service import ShoppingService
from wrappers.page_actions import PageActions
from wrappers.soft_expect import SoftAssertions


REPORT_DIR = Path.cwd() / "reports"
REPORT_FILE = REPORT_DIR / "report.html"


# ---------------------------------------------------------------------------
# Load configuration
# ---------------------------------------------------------------------------
with open(Path(__file__).parent / "config.json", encoding="utf-8") as f:
    CONFIG = json.load(f)


# ---------------------------------------------------------------------------
# CLI options
# ---------------------------------------------------------------------------
def pytest_addoption(parser):
    parser.addoption(
        "--highlight",
        action="store",
        choices=["true", "false"],
        help="Highlight elements during tests",
    )

    parser.addoption(
        "--screenshot_on_error",
        action="store",
        choices=["true", "false"],
        help="Capture screenshot on test failure",
    )

    parser.addoption(
        "--step_delay",
        action="store",
        type=int,
        help="Delay (in ms) before each click or fill",
    )

    parser.addoption(
        "--wait_timeout",
        action="store",
        type=int,
        help="Explicit wait budget (in ms)",
    )

    parser.addoption(
        "--test_env",
        action="store",
        help="Fixture data set under data/ (overrides TEST_ENV)",
    )


# ---------------------------------------------------------------------------
# Config fixture
# ---------------------------------------------------------------------------
@pytest.fixture(scope="session")
def config(pytestconfig):
    cfg = CONFIG.copy()

    # Browser and headless (pytest-playwright options)
    browser = pytestconfig.getoption("browser", default=None)
    headed = pytestconfig.getoption("headed", default=False)
    if browser:
        cfg["browser"] = browser[0] if isinstance(browser, (list, tuple)) else browser
    cfg["headless"] = not bool(headed)

    # Base URL (pytest-base-url option)
    base_url = pytestconfig.getoption("base_url", default=None)
    if base_url:
        cfg["base_url"] = base_url

    # Highlight mode and screenshot on error
    cfg["highlight"] = resolve_flag(pytestconfig.getoption("highlight"), cfg.get("highlight", False))
    cfg["screenshot_on_error"] = resolve_flag(pytestconfig.getoption("screenshot_on_error"),
                                              cfg.get("screenshot_on_error", False))

    # Video and trace (pytest-playwright options, "off" leaves config.json in charge)
    for key in ("video", "tracing"):
        option = pytestconfig.getoption(key, default=None)
        if option and option != "off":
            cfg[key] = option
        cfg[key] = artifact_mode(cfg.get(key))

    # Step delay
    step_delay = pytestconfig.getoption("step_delay")
    if step_delay is not None:
        cfg["step_delay"] = float(step_delay)
    else:
        cfg["step_delay"] = float(cfg.get("step_delay", 0.0))

    # Wait timeout
    wait_timeout = pytestconfig.getoption("wait_timeout")
    if wait_timeout is not None:
        cfg["wait_timeout"] = float(wait_timeout)

    # Fixture data environment
    test_env = pytestconfig.getoption("test_env") or os.environ.get("TEST_ENV")
    if test_env:
        cfg["test_env"] = test_env

    return cfg


# ---------------------------------------------------------------------------
# Playwright fixtures
# ---------------------------------------------------------------------------
@pytest.fixture(scope="session")
def playwright_instance():
    """Provide a shared Playwright instance."""
    with sync_playwright() as p:
        yield p


@pytest.fixture(scope="session")
def browser(playwright_instance, config):
    """Launch a browser based on config."""
    browser_name = config.get("browser", "chromium")
    headless = config.get("headless", True)
    browser = getattr(playwright_instance, browser_name).launch(headless=headless)
    yield browser
    browser.close()


@pytest.fixture(scope="function")
def context(request, browser, config):
    """New browser context per test, so every scenario starts with an empty session."""
    context = browser.new_context(**video_options(config["video"]))
    context.set_default_timeout(config.get("timeout", 30000))
    start_tracing(context, config["tracing"])
    yield context

    try:
        stop_tracing(context, config["tracing"], _node_failed(request.node), request.node.name)
    finally:
        context.close()


@pytest.fixture(scope="function")
def page(request, context, config):
    """New page per test."""
    page = context.new_page()
    page.set_default_timeout(config.get("timeout", 30000))
    yield page
    page.close()

    # The recording is complete only once the page is closed
    finish_video(page, config["video"], _node_failed(request.node), request.node.name)


def _node_failed(node) -> bool:
    """True once setup, the test body or its soft assertions have failed."""
    if getattr(node, "soft_failed", False):
        return True
    return any(getattr(getattr(node, f"rep_{when}", None), "failed", False) for when in ("setup", "call"))


# ---------------------------------------------------------------------------
# Page object fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def soft_assertions(request, page, config):
    """Collect soft failures of one test and report them all at teardown."""
    soft = SoftAssertions()
    yield soft

    # Page teardown runs before the teardown report exists
    request.node.soft_failed = soft.has_failures()

    if soft.has_failures() and config.get("screenshot_on_error") and not page.is_closed():
        try:
            take_screenshot(page, f"{request.node.name}-soft-assertions")
        except Exception as e:
            print(f"[WARN] Screenshot capture failed: {e}")

    soft.assert_all()


@pytest.fixture
def page_actions(page, config, soft_assertions):
    return PageActions(page, config, soft_assertions)


@pytest.fixture
def login_page(page_actions):
    return LoginPage(page_actions)


@pytest.fixture
def home_page(page_actions):
    return HomePage(page_actions)


@pytest.fixture
def product_page(page_actions):
    return ProductPage(page_actions)


@pytest.fixture
def cart_page(page_actions):
    return CartPage(page_actions)


@pytest.fixture
def checkout_page(page_actions):
    return CheckoutPage(page_actions)


@pytest.fixture
def shopping_service(login_page, home_page, product_page, cart_page, checkout_page):
    return ShoppingService(login_page, home_page, product_page, cart_page, checkout_page)


@pytest.fixture(scope="session")
def test_data(config):
    return TestDataLoader(config.get("test_env"))


# ---------------------------------------------------------------------------
# Report
# ---------------------------------------------------------------------------
@pytest.hookimpl(tryfirst=True)
def pytest_configure(config):
    """Make sure reports/ exists and direct pytest-html there."""
    REPORT_DIR.mkdir(parents=True, exist_ok=True)
    if hasattr(config.option, "htmlpath") and not config.option.htmlpath:
        config.option.htmlpath = str(REPORT_FILE)
        print(f"[INFO] HTML report → {REPORT_FILE}")


def pytest_sessionstart(session):
    """Delete old report & screenshots before the session begins."""
    REPORT_DIR.mkdir(parents=True, exist_ok=True)
    for f in REPORT_DIR.glob("*"):
        try:
            if f.is_dir():
                shutil.rmtree(f)
            else:
                f.unlink()
        except OSError as e:
            print(f"[WARN] Could not remove {f}: {e}")


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Capture a Playwright screenshot and attach it to the HTML report."""
    outcome = yield
    rep = outcome.get_result()
    setattr(item, f"rep_{rep.when}", rep)

    # Run only when the test itself failed
    if rep.when != "call" or not rep.failed:
        return

    try:
        screenshot_enabled = resolve_flag(item.config.getoption("screenshot_on_error"),
                                          CONFIG.get("screenshot_on_error", False))

        if not screenshot_enabled:
            return

        # Unit tests have no browser page
        page = item.funcargs.get("page", None)
        if page is None or not hasattr(page, "screenshot") or page.is_closed():
            return

        # Give browser time to render any failure overlay
        time.sleep(0.2)

        screenshot_path = take_screenshot(page, item.name, SCREENSHOT_DIR)
        print(f"[INFO] Screenshot saved → {screenshot_path}")

        # Attach to pytest-html report
        html = item.config.pluginmanager.getplugin("html")
        if html:
            rel_path = screenshot_path.relative_to(REPORT_DIR).as_posix()
            link_html = f'<a href="{rel_path}" target="_blank">Open Screenshot</a>'
            rep.extras = getattr(rep, "extras", [])
            rep.extras.append(html.extras.html(link_html))
            rep.extras.append(html.extras.image(rel_path))

    except Exception as e:
        print(f"[WARN] Screenshot capture failed: {e}")
