import re
from common.constants import CART_SETTLE_DELAY, CART_URL_PATTERN, HOME_URL_PATTERN
from decorators.step_decorators import step
from enums.category import Category
from locators.cart_locators import CartLocators
from locators.home_locators import HomeLocators
from wrappers.page_actions import PageActions


class HomePage:

    def __init__(self, actions: PageActions):
        self.actions = actions
        self.locators = actions.register(HomeLocators)
        self.cart_locators = actions.register(CartLocators)

    def _category_locator(self, category: Category):
        return {
            Category.PHONES: self.locators.category_phones,
            Category.LAPTOPS: self.locators.category_laptops,
            Category.MONITORS: self.locators.category_monitors,
        }[Category(category)]

    @step(lambda category, **_: f"Select category {Category(category).value}")
    def select_category(self, category: Category):
        self.actions.click(self._category_locator(category))

    @step(lambda product_name, **_: f"Select product {product_name}")
    def select_product(self, product_name: str):
        self.actions.click(self.locators.product_link(product_name))

    @step("Click Home link")
    def click_home(self):
        self.actions.click(self.locators.home_nav_link)

    @step("Go to Cart")
    def go_to_cart(self):
        self.actions.click(self.locators.cart_nav_link)
        self.actions.wait_for_url_match(CART_URL_PATTERN)
        self.actions.wait_for_visible(self.cart_locators.cart_table)
        # Rows are filled from the cart API after the page itself has loaded
        self.actions.settle(self.actions.config_delay("cart_settle_delay", CART_SETTLE_DELAY),
                            "for cart rows to render")

    @step("Verify welcome message")
    def verify_welcome_message(self, username: str) -> bool:
        welcome_text = self.actions.get_text(self.locators.navbar_welcome_text)
        return self.actions.soft.contains(welcome_text, f"Welcome {username}", "Welcome text")

    @step("Verify login button hidden")
    def verify_login_button_hidden(self) -> bool:
        return self.actions.soft.expect(self.locators.navbar_login_button).to_be_hidden()

    @step("Verify logout button visible")
    def verify_logout_button_visible(self) -> bool:
        return self.actions.soft.expect(self.locators.navbar_logout_button).to_be_visible()

    @step("Verify at home page")
    def verify_at_home(self):
        self.actions.wait_for_url_match(HOME_URL_PATTERN)

    @step("Verify at home page by URL")
    def verify_at_home_by_url(self) -> bool:
        return self.actions.soft.expect(self.actions.page).to_have_url(re.compile(HOME_URL_PATTERN))
