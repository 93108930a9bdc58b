import logging
from decorators.step_decorators import step
from models.cart import OrderConfirmation
from models.fixture_data import CheckoutData, Product, User
from pages.cart_page import CartPage
from pages.checkout_page import CheckoutPage
from pages.home_page import HomePage
from pages.login_page import LoginPage
from pages.product_page import ProductPage

logger = logging.getLogger(__name__)


class ShoppingService:
    """Scenario building blocks composed from the page objects."""

    def __init__(self, login_page: LoginPage, home_page: HomePage, product_page: ProductPage,
                 cart_page: CartPage, checkout_page: CheckoutPage):
        self.login_page = login_page
        self.home_page = home_page
        self.product_page = product_page
        self.cart_page = cart_page
        self.checkout_page = checkout_page

    @step("Open store")
    def open_store(self):
        self.login_page.navigate_to_home_page()

    @step(lambda user, **_: f"Login as {user.username}")
    def login(self, user: User) -> bool:
        self.login_page.login(user.username, user.password)
        return self.home_page.verify_welcome_message(user.username)

    @step(lambda product, **_: f"Add {product.name} to cart")
    def add_product_to_cart(self, product: Product) -> float:
        """
        Browse to the product from the home page and add it to the cart.

        Returns:
            float: Price displayed on the product page.
        """
        self.home_page.click_home()
        self.home_page.select_category(product.category)
        self.home_page.select_product(product.name)

        price = self.product_page.get_product_price()
        if product.price is not None and price != product.price:
            logger.warning("Price of %s changed: fixture %s, site %s", product.name, product.price, price)

        self.product_page.add_to_cart()
        return price

    @step("Ensure cart is empty")
    def ensure_empty_cart(self):
        self.home_page.go_to_cart()
        self.cart_page.clear_cart()
        self.cart_page.verify_cart_item_count(0)

    @step("Place order")
    def place_order(self, checkout_data: CheckoutData) -> OrderConfirmation:
        self.cart_page.click_place_order()
        return self.checkout_page.complete_purchase(checkout_data)
