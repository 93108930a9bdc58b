import logging
import re
from contextlib import contextmanager
from pathlib import Path
from typing import Callable, Optional
from playwright.sync_api import Error as PlaywrightError, Locator, Page, expect
from common.constants import (DEFAULT_TIMEOUT,
                              ENABLE_POLL_ATTEMPTS,
                              ENABLE_POLL_INTERVAL,
                              RETRY_CLICK_ATTEMPTS)
from common.exceptions import ElementNotEnabledError
from decorators.step_decorators import step
from helpers.screenshot_helper import take_screenshot
from utils.web_utils import get_box_center, highlight_element, reset_element_style
from wrappers.soft_expect import SoftAssertions

logger = logging.getLogger(__name__)

DEBUG = logging.DEBUG


class PageActions:
    """
    PageActions is the shared action set every page object holds by reference:
    - Safe primitives (click, fill, ...) that wait for the element and
      soft-assert its state before acting.
    - Explicit wait helpers with a default budget (config "wait_timeout").
    - Locator registries bound through register() follow set_page(),
      so a popup or new tab re-targets every page object at once.
    - Optional element highlight and step delay from config, for watching runs.
    """

    def __init__(self, page: Page, config: dict, soft: SoftAssertions = None):
        self.page = page
        self.config = config
        self.soft = soft if soft is not None else SoftAssertions()
        self.timeout = float(config.get("wait_timeout") or DEFAULT_TIMEOUT)
        self._registries = []

    # ---------------------------------------------------------------------
    # Page handle management
    # ---------------------------------------------------------------------

    def register(self, registry_cls):
        registry = registry_cls(self.page)
        self._registries.append(registry)
        return registry

    def set_page(self, new_page: Page):
        if new_page is self.page:
            return

        self.page = new_page
        for registry in self._registries:
            registry.set_page(new_page)

    def config_delay(self, key: str, default: float) -> float:
        value = self.config.get(key)
        return float(default if value is None else value)

    # ---------------------------------------------------------------------
    # Navigation
    # ---------------------------------------------------------------------

    @step(lambda url, **_: f"Navigate to URL: {url}", level=DEBUG)
    def navigate(self, url: str, load_state: str = "domcontentloaded",
                 wait_for_selector: str = None, timeout: float = None):
        timeout = timeout or self.timeout
        logger.info("[NAVIGATE] Navigating to: %s | loadState: %s", url, load_state)

        try:
            response = self.page.goto(url, wait_until=load_state, timeout=timeout)
            if not response or not response.ok:
                status = response.status if response else None
                logger.warning("[NAVIGATE] Navigation to %s returned status %s", url, status)

            self.page.wait_for_load_state(load_state, timeout=timeout)

            if wait_for_selector:
                logger.info("[NAVIGATE] Waiting for selector: %s", wait_for_selector)
                self.page.wait_for_selector(wait_for_selector, timeout=timeout)

        except PlaywrightError:
            logger.error("[NAVIGATE] Failed to navigate to %s", url)
            raise

        logger.info("[NAVIGATE] Navigation to %s complete.", url)

    @step(lambda pattern, **_: f"Wait current url match with: {pattern}", level=DEBUG)
    def wait_for_url_match(self, pattern, timeout: float = None):
        final_pattern = re.compile(pattern) if isinstance(pattern, str) else pattern
        self.page.wait_for_url(final_pattern, timeout=timeout or self.timeout)

    @step("Get page URL", level=DEBUG)
    def get_page_url(self) -> str:
        return self.page.url

    @step("Reload current page", level=DEBUG)
    def reload_page(self):
        self.page.reload()

    @step("Verify the current URL matches the expected URL", level=DEBUG)
    def verify_url(self, expected_url):
        expect(self.page).to_have_url(expected_url)

    # ---------------------------------------------------------------------
    # Interaction
    # ---------------------------------------------------------------------

    def _is_clickable(self, locator: Locator) -> bool:
        self.wait_for_visible(locator)
        self.soft.expect(locator).to_be_visible()
        self.soft.expect(locator).to_be_enabled()

        if locator.is_enabled() and self.get_attribute(locator, "disabled") != "disabled":
            return True

        logger.warning("Locator is disabled, action skipped: %s", locator)
        return False

    @contextmanager
    def _highlighted(self, locator: Locator):
        highlight = bool(self.config.get("highlight"))
        step_delay = self.config_delay("step_delay", 0)
        original_style = highlight_element(locator) if highlight else None

        if step_delay > 0:
            self.page.wait_for_timeout(step_delay)

        try:
            yield
        finally:
            if highlight:
                try:
                    if locator.count() > 0:
                        reset_element_style(locator, original_style)
                except PlaywrightError as e:
                    # Element left the page with the action (navigation, removal)
                    logger.debug("Element style not restored: %s", e)

    @step(lambda locator, **_: f"Click on locator: {locator}", level=DEBUG)
    def click(self, locator: Locator, **options):
        if self._is_clickable(locator):
            with self._highlighted(locator):
                locator.click(**options)

    @step(lambda locator, **_: f"Double Click on Locator: {locator}", level=DEBUG)
    def dblclick(self, locator: Locator, **options):
        if self._is_clickable(locator):
            with self._highlighted(locator):
                locator.dblclick(**options)

    @step(lambda locator, value, **_: f"Fill input value: Locator={locator}, Value={value}", level=DEBUG)
    def fill(self, locator: Locator, value: str, force: bool = True):
        self.wait_for_visible(locator)
        self.soft.expect(locator).to_be_visible()

        if locator.is_editable() and locator.is_enabled():
            with self._highlighted(locator):
                locator.clear()
                locator.click()
                locator.fill(value, force=force)
        else:
            logger.warning("Locator is not editable, fill skipped: %s", locator)

    @step(lambda locator, **_: f"Check checkbox/radio button: {locator}", level=DEBUG)
    def check(self, locator: Locator):
        self.wait_for_visible(locator)
        locator.check()

    @step(lambda locator, **_: f"Uncheck checkbox/radio button: {locator}", level=DEBUG)
    def uncheck(self, locator: Locator):
        self.wait_for_visible(locator)
        locator.uncheck()

    @step(lambda text, **_: f"Click on Text: {text}", level=DEBUG)
    def click_by_text(self, text: str):
        self.page.get_by_text(text).click()

    @step(lambda locator, **_: f"Hover over Locator: {locator}", level=DEBUG)
    def hover(self, locator: Locator):
        self.wait_for_visible(locator)
        self.soft.expect(locator).to_be_visible()
        locator.hover()

    @step(lambda locator, key, **_: f"Focus on locator: {locator} and press key: {key}", level=DEBUG)
    def press(self, locator: Locator, key: str):
        self.wait_for_visible(locator)
        locator.press(key)

    @step(lambda locator, value, **_: f"Fill input if visible: Locator={locator}, Value={value}",
          level=DEBUG)
    def fill_input_if_visible(self, locator: Locator, value: str):
        self.wait_for_visible(locator)

        if value and self.count(locator) > 0:
            self.scroll_into_view(locator)
            self.fill(locator, value)

    @step(lambda locator, **_: f"Clear input field: Locator={locator}", level=DEBUG)
    def clear_input(self, locator: Locator):
        self.wait_for_visible(locator)
        locator.fill("")

    @step(lambda dropdown, option_text, **_:
          f"Select custom dropdown option: Locator={dropdown}, OptionText={option_text}", level=DEBUG)
    def select_option_by_text(self, dropdown: Locator, option_text: str,
                              options_locator: Optional[Locator] = None):
        """
        Select an option from a custom (div-based) dropdown by visible text.

        Args:
            dropdown: Locator of the dropdown input box.
            option_text: Text of the option to select.
            options_locator: Optional locator for the list of all options.
        """
        self.wait_for_visible(dropdown)
        self.click(dropdown)

        if options_locator is not None:
            option = options_locator.filter(has_text=option_text)
        else:
            option = self.page.locator(f'text="{option_text}"')

        self.wait_for_visible(option.first)
        self.click(option.first)

    @step(lambda locator, file_path, **_:
          f"Upload a file to a file input field: Locator={locator}, FilePath={file_path}", level=DEBUG)
    def upload_file(self, locator: Locator, file_path: str):
        locator.set_input_files(file_path)

    @step(lambda locator, retries=RETRY_CLICK_ATTEMPTS, **_:
          f"Retry clicking on Locator: Locator={locator}, Retries={retries}", level=DEBUG)
    def retry_click(self, locator: Locator, retries: int = RETRY_CLICK_ATTEMPTS):
        if retries < 1:
            raise ValueError(f"retries must be positive, got {retries}")

        for attempt in range(1, retries + 1):
            try:
                self.click(locator)
                return
            except (PlaywrightError, AssertionError):
                logger.warning("Retry %d failed for clicking on Locator. Retrying...", attempt)
                if attempt == retries:
                    raise

    @step(lambda trigger, target, **_: f"Click {trigger} and wait for {target} to disappear",
          level=DEBUG)
    def click_and_wait_for_removal(self, trigger: Locator, target: Locator, timeout: float = None):
        """
        Click ``trigger`` and wait until ``target`` is detached or hidden.

        The target node is pinned before the click, so a removal that lands
        while the click is still resolving is observed, and a re-rendered
        sibling matching the same selector is not mistaken for the target.
        """
        timeout = timeout or self.timeout
        handle = target.element_handle(timeout=timeout)

        try:
            self.click(trigger)
            # "hidden" resolves for both a detached and an invisible element
            handle.wait_for_element_state("hidden", timeout=timeout)
        finally:
            handle.dispose()

    @step(lambda source, target, **_: f"Drag and drop: {source} to {target}", level=DEBUG)
    def drag_and_drop(self, source: Locator, target: Locator):
        self.wait_for_visible(source)
        self.wait_for_visible(target)

        source_x, source_y = get_box_center(source.bounding_box())
        target_x, target_y = get_box_center(target.bounding_box())

        self.page.mouse.move(source_x, source_y)
        self.page.mouse.down()
        # Intermediate steps keep drag listeners firing
        self.page.mouse.move(target_x, target_y, steps=10)
        self.page.mouse.up()

    # ---------------------------------------------------------------------
    # Waits
    # ---------------------------------------------------------------------

    @step(lambda locator, **_: f"Wait Locator with visible state: Locator={locator}", level=DEBUG)
    def wait_for_visible(self, locator: Locator, timeout: float = None):
        locator.wait_for(state="visible", timeout=timeout or self.timeout)

    @step(lambda locator, **_: f"Wait Locator with hidden state: Locator={locator}", level=DEBUG)
    def wait_for_hidden(self, locator: Locator, timeout: float = None):
        locator.wait_for(state="hidden", timeout=timeout or self.timeout)

    @step(lambda locator, **_: f"Wait Locator with attached state: Locator={locator}", level=DEBUG)
    def wait_for_attached(self, locator: Locator, timeout: float = None):
        locator.wait_for(state="attached", timeout=timeout or self.timeout)

    @step(lambda locator, **_: f"Wait Locator with detached state: Locator={locator}", level=DEBUG)
    def wait_for_detached(self, locator: Locator, timeout: float = None):
        locator.wait_for(state="detached", timeout=timeout or self.timeout)

    @step(lambda locator, **_: f"Wait for an element to disappear: Locator={locator}", level=DEBUG)
    def wait_for_element_to_disappear(self, locator: Locator, timeout: float = None):
        self.wait_for_hidden(locator, timeout)

    @step(lambda locator, text, **_: f"Wait for text to appear in locator: Locator={locator}, Text={text}",
          level=DEBUG)
    def wait_for_text(self, locator: Locator, text: str):
        expect(locator).to_have_text(text, timeout=self.timeout)

    @step(lambda locator, **_: f"Wait for Locator to be enabled: Locator={locator}", level=DEBUG)
    def wait_for_element_to_be_enabled(self, locator: Locator,
                                       attempts: int = ENABLE_POLL_ATTEMPTS,
                                       interval: float = ENABLE_POLL_INTERVAL):
        # Elements can be visible long before their disabled attribute is cleared
        for _ in range(attempts):
            if locator.is_enabled():
                return
            self.page.wait_for_timeout(interval)

        raise ElementNotEnabledError(
            f"Locator did not become enabled after {attempts} attempts: {locator}")

    @step(lambda milliseconds, reason="", **_: f"Settle for {milliseconds} ms {reason}".strip(),
          level=DEBUG)
    def settle(self, milliseconds: float, reason: str = ""):
        """Fixed pause for an asynchronous UI update the page gives no signal for."""
        if milliseconds and milliseconds > 0:
            self.page.wait_for_timeout(milliseconds)

    @step("Wait for native dialog", level=DEBUG)
    def wait_for_dialog(self, trigger: Callable[[], None], accept: bool = True,
                        prompt_text: str = None, timeout: float = None) -> str:
        """
        Run ``trigger`` with a dialog listener registered beforehand,
        then accept or dismiss the dialog.

        Returns:
            str: The dialog message.
        """
        with self.page.expect_event("dialog", timeout=timeout or self.timeout) as dialog_info:
            trigger()

        dialog = dialog_info.value
        message = dialog.message
        logger.info("Alert message: %s", message)

        if not accept:
            dialog.dismiss()
        elif prompt_text is not None:
            dialog.accept(prompt_text)
        else:
            dialog.accept()
        return message

    @step("Wait for file download", level=DEBUG)
    def wait_for_download(self, trigger: Callable[[], None], timeout: float = None) -> str:
        with self.page.expect_download(timeout=timeout or self.timeout) as download_info:
            trigger()

        path = download_info.value.path()
        if not path:
            raise RuntimeError("Download failed or was cancelled")
        return str(path)

    # ---------------------------------------------------------------------
    # Queries
    # ---------------------------------------------------------------------

    @step(lambda locator, **_: f"Check Locator is visible or not: Locator={locator}", level=DEBUG)
    def is_visible(self, locator: Locator) -> bool:
        return locator.is_visible()

    @step(lambda locator, **_: f"Check Locator is enabled or not: Locator={locator}", level=DEBUG)
    def is_enabled(self, locator: Locator) -> bool:
        return locator.is_enabled()

    @step(lambda locator, **_: f"Check Locator is editable or not: Locator={locator}", level=DEBUG)
    def is_editable(self, locator: Locator) -> bool:
        return locator.is_editable()

    @step(lambda locator, **_: f"Get text of locator: Locator={locator}", level=DEBUG)
    def get_text(self, locator: Locator) -> str:
        self.wait_for_visible(locator)
        return locator.text_content() or ""

    @step(lambda label, **_: f"Get text by label: Label={label}", level=DEBUG)
    def get_text_by_label(self, label: str) -> str:
        return self.page.get_by_label(label).text_content() or ""

    @step(lambda selector, **_: f"Get input value: Locator={selector}", level=DEBUG)
    def get_input_value(self, selector: str) -> str:
        return self.page.locator(selector).input_value()

    @step(lambda locator, attribute, **_: f"Check Locator attribute: Locator={locator}, Attribute={attribute}",
          level=DEBUG)
    def get_attribute(self, locator: Locator, attribute: str) -> str:
        if locator.count() == 0:
            return ""
        return locator.get_attribute(attribute) or ""

    @step("Expect Locator to be hidden", level=DEBUG)
    def to_be_hidden(self, locator: Locator) -> bool:
        return self.soft.expect(locator).to_be_hidden()

    @step(lambda locator, **_: f"Scroll an element into view: Locator={locator}", level=DEBUG)
    def scroll_into_view(self, locator: Locator):
        self.soft.expect(locator).to_be_visible()
        locator.scroll_into_view_if_needed()

    @step(lambda locator, **_: f"Get the count of elements matching the locator: Locator={locator}",
          level=DEBUG)
    def count(self, locator: Locator) -> int:
        count = locator.count()
        logger.debug("Counted %d elements matching the locator", count)
        return count

    @step(lambda locator, trim=True, **_: f"Get Text of Locator: Locator={locator}, Trim={trim}", level=DEBUG)
    def text_content(self, locator: Locator, trim: bool = True) -> str:
        self.soft.expect(locator).to_be_visible()
        content = locator.text_content() or ""
        return content.strip() if trim else content

    @step(lambda locator, **_: f"Get Inner Text of Locator: Locator={locator}", level=DEBUG)
    def inner_text(self, locator: Locator) -> str:
        return (locator.inner_text() or "").strip()

    @step(lambda locator, text, **_:
          f"Check if a Locator contains a specific text: Locator={locator}, Text={text}", level=DEBUG)
    def check_contains_text(self, locator: Locator, text: str) -> bool:
        return text in (locator.text_content() or "")

    # ---------------------------------------------------------------------
    # Diagnostics
    # ---------------------------------------------------------------------

    @step(lambda name, **_: f"Take a screenshot of the current page: {name}", level=DEBUG)
    def take_screenshot(self, name: str) -> Optional[Path]:
        if self.page.is_closed():
            logger.warning("Cannot take screenshot, the page is already closed.")
            return None
        return take_screenshot(self.page, name)

    def __str__(self):
        return f"<PageActions registries={len(self._registries)}>"

    __repr__ = __str__
