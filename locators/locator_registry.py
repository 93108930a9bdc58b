from playwright.sync_api import Locator, Page
from common.constants import KEYWORD_PLACEHOLDER
from locators.common_locators import COMMON_SELECTORS, COMMON_TEMPLATES, xpath_literal


class LocatorRegistry:
    """
    LocatorRegistry maps semantic element names to selector strings for one screen:
    - Page-specific ``selectors`` are merged over the shared navbar selectors.
    - Locators are Playwright Locator objects, so they are resolved lazily
      against the live document on every use and survive re-renders.
    - ``templates`` hold XPath selectors with a #KEYWORD placeholder for
      parameterized lookups (e.g. "delete button for product named X").
      The keyword is inserted as a quoted XPath literal.
    - set_page() re-creates the locators only when the page handle changes
      (new tab, popup).
    """

    selectors: dict[str, str] = {}
    templates: dict[str, str] = {}

    def __init__(self, page: Page):
        self.page = page
        self._selectors = {**COMMON_SELECTORS, **self.selectors}
        self._templates = {**COMMON_TEMPLATES, **self.templates}
        self._initialize_locators()

    def _initialize_locators(self):
        self._locators = {name: self.page.locator(selector)
                          for name, selector in self._selectors.items()}

    def set_page(self, new_page: Page):
        if new_page is not self.page:
            self.page = new_page
            self._initialize_locators()

    def get_page(self) -> Page:
        return self.page

    def selector(self, name: str) -> str:
        return self._selectors[name]

    def names(self) -> list[str]:
        return list(self._selectors)

    def by_keyword(self, name: str, keyword: str) -> Locator:
        selector = self._templates[name].replace(KEYWORD_PLACEHOLDER, xpath_literal(keyword))
        return self.page.locator(selector)

    def __getattr__(self, item):
        locators = self.__dict__.get("_locators")

        if locators is not None and item in locators:
            return locators[item]
        raise AttributeError(f"{self.__class__.__name__} has no locator '{item}'")

    def __str__(self):
        return f"<{self.__class__.__name__} locators={len(self._selectors)}>"

    __repr__ = __str__
