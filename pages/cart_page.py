from typing import Iterable
from playwright.sync_api import expect
from decorators.step_decorators import step
from locators.cart_locators import CartLocators
from models.cart import CartItem
from utils.text_utils import parse_price
from wrappers.page_actions import PageActions


class CartPage:
    """
    Cart screen. Rows are rendered asynchronously from the cart API,
    so every read waits on the table first and counts are polled.
    """

    def __init__(self, actions: PageActions):
        self.actions = actions
        self.locators = actions.register(CartLocators)

    @step("Get cart items")
    def get_cart_items(self) -> list[CartItem]:
        self.actions.wait_for_visible(self.locators.cart_table)

        items = []
        for row in self.locators.cart_item_row.all():
            name = self.locators.cart_item_name(row).text_content() or ""
            price_text = self.locators.cart_item_price(row).text_content() or ""

            if name.strip():
                items.append(CartItem(name, parse_price(price_text)))
        return items

    @step(lambda product_name, **_: f"Verify cart contains product {product_name}")
    def verify_cart_contains_product(self, product_name: str) -> bool:
        # Site casing differs from the catalog ("MacBook air")
        expected = product_name.strip().lower()
        found = any(item.name.lower() == expected for item in self.get_cart_items())
        return self.actions.soft.check(found, f"Cart does not contain product '{product_name}'")

    @step(lambda count, **_: f"Verify cart item count is {count}")
    def verify_cart_item_count(self, count: int) -> bool:
        self.actions.wait_for_visible(self.locators.cart_table)
        return self.actions.soft.expect(
            self.locators.cart_item_row, f"Cart item count should be {count}"
        ).to_have_count(count, timeout=self.actions.timeout)

    @step("Get cart item count")
    def get_item_count(self) -> int:
        self.actions.wait_for_visible(self.locators.cart_table)
        return self.actions.count(self.locators.cart_item_row)

    @step("Get cart total")
    def get_total(self) -> float:
        return parse_price(self.actions.get_text(self.locators.cart_total))

    @step(lambda expected_total, **_: f"Verify cart total is {expected_total}")
    def verify_total(self, expected_total: float) -> bool:
        return self.actions.soft.equal(self.get_total(), float(expected_total), "Cart total")

    @step(lambda product_name, **_: f"Remove item {product_name} from cart")
    def remove_item(self, product_name: str):
        row = self.locators.cart_row_by_product_name(product_name).first
        delete_button = self.locators.delete_button_in_row(row)

        self.actions.wait_for_visible(delete_button)
        self.actions.click_and_wait_for_removal(delete_button, row)

    @step("Clear all cart items")
    def clear_cart(self):
        self.actions.wait_for_visible(self.locators.cart_table)
        delete_buttons = self.locators.delete_buttons

        remaining = self.actions.count(delete_buttons)
        while remaining > 0:
            self.actions.click(delete_buttons.first)
            remaining -= 1
            # Next click only after the previous removal is observed
            expect(delete_buttons).to_have_count(remaining, timeout=self.actions.timeout)

    @step("Click Place Order")
    def click_place_order(self):
        self.actions.click(self.locators.place_order_button)

    @staticmethod
    def calculate_total(items: Iterable[CartItem]) -> float:
        return sum((item.price for item in items), 0.0)
