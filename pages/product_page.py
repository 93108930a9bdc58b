from common.constants import ADD_TO_CART_SETTLE_DELAY
from decorators.step_decorators import step
from locators.product_locators import ProductLocators
from utils.text_utils import parse_price
from wrappers.page_actions import PageActions


class ProductPage:

    def __init__(self, actions: PageActions):
        self.actions = actions
        self.locators = actions.register(ProductLocators)

    @step("Add product to cart")
    def add_to_cart(self) -> str:
        """
        Click "Add to cart" and accept the "Product added" alert.

        Returns:
            str: The alert message.
        """
        message = self.actions.wait_for_dialog(
            lambda: self.actions.click(self.locators.add_to_cart_button))
        self.actions.settle(
            self.actions.config_delay("add_to_cart_settle_delay", ADD_TO_CART_SETTLE_DELAY),
            "after add to cart alert")
        return message

    @step("Get product name")
    def get_product_name(self) -> str:
        return self.actions.get_text(self.locators.product_name).strip()

    @step("Get product price")
    def get_product_price(self) -> float:
        # "$790 *includes tax" -> 790.0
        return parse_price(self.actions.get_text(self.locators.product_price))

    @step(lambda name, price=None, **_: f"Verify product details: {name}, {price}")
    def verify_product_details(self, name: str, price: float = None) -> bool:
        soft = self.actions.soft

        passed = soft.equal(self.get_product_name(), name, "Product name")
        if price is not None:
            passed = soft.equal(self.get_product_price(), price, "Product price") and passed
        return passed

    @step("Navigate to home")
    def navigate_home(self):
        self.actions.click(self.locators.home_nav_link)
