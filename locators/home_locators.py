from playwright.sync_api import Locator
from locators.common_locators import lowercase_xpath
from locators.locator_registry import LocatorRegistry


class HomeLocators(LocatorRegistry):

    selectors = {
        "category_phones": '//a[contains(text(),"Phones") and @onclick="byCat(\'phone\')"]',
        "category_laptops": '//a[contains(text(),"Laptops") and @onclick="byCat(\'notebook\')"]',
        "category_monitors": '//a[contains(text(),"Monitors") and @onclick="byCat(\'monitor\')"]',
    }

    templates = {
        "product_link": f'//a[@class="hrefch" and {lowercase_xpath("text()")}=#KEYWORD]',
    }

    def product_link(self, name: str) -> Locator:
        # Catalog casing differs between fixtures and the site ("MacBook air")
        return self.by_keyword("product_link", name.strip().lower())
