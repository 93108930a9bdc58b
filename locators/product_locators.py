from locators.locator_registry import LocatorRegistry


class ProductLocators(LocatorRegistry):

    selectors = {
        "product_name": '//h2[@class="name"]',
        "product_price": '//h3[@class="price-container"]',
        "add_to_cart_button": '//a[contains(@onclick,"addToCart")]',
    }
