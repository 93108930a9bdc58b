from common.constants import CONFIRMATION_CLOSE_DELAY, ORDER_CONFIRMATION_MESSAGE
from decorators.step_decorators import step
from locators.checkout_locators import CheckoutLocators
from models.cart import OrderConfirmation
from models.fixture_data import CheckoutData
from utils.text_utils import extract_order_amount, extract_order_id
from wrappers.page_actions import PageActions


class CheckoutPage:

    def __init__(self, actions: PageActions):
        self.actions = actions
        self.locators = actions.register(CheckoutLocators)

    @step("Fill checkout form")
    def fill_checkout_form(self, data: CheckoutData):
        self.actions.wait_for_visible(self.locators.checkout_modal)

        fields = [
            (self.locators.name_input, data.name),
            (self.locators.country_input, data.country),
            (self.locators.city_input, data.city),
            (self.locators.credit_card_input, data.credit_card),
            (self.locators.month_input, data.month),
            (self.locators.year_input, data.year),
        ]
        for locator, value in fields:
            self.actions.click(locator)
            self.actions.fill(locator, value)

    @step("Click Purchase button")
    def click_purchase(self):
        self.actions.click(self.locators.purchase_button)
        self.actions.wait_for_visible(self.locators.confirmation_modal)

    @step("Verify order confirmation")
    def verify_order_confirmation(self) -> bool:
        message = self.actions.get_text(self.locators.confirmation_message)
        return self.actions.soft.contains(message, ORDER_CONFIRMATION_MESSAGE, "Confirmation message")

    def _confirmation_details(self) -> str:
        return self.actions.get_text(self.locators.confirmation_details)

    @step("Get order ID")
    def get_order_id(self) -> str:
        return extract_order_id(self._confirmation_details())

    @step("Get order amount")
    def get_order_amount(self) -> float:
        return extract_order_amount(self._confirmation_details())

    @step("Get order confirmation")
    def get_order_confirmation(self) -> OrderConfirmation:
        details = self._confirmation_details()
        return OrderConfirmation(extract_order_id(details), extract_order_amount(details))

    @step("Close confirmation modal")
    def close_confirmation(self):
        # OK button ignores clicks for a while after the alert animates in
        self.actions.settle(
            self.actions.config_delay("confirmation_close_delay", CONFIRMATION_CLOSE_DELAY),
            "before closing confirmation")
        self.actions.click(self.locators.confirmation_ok_button)
        self.actions.wait_for_hidden(self.locators.confirmation_modal)

    @step("Complete purchase")
    def complete_purchase(self, data: CheckoutData) -> OrderConfirmation:
        self.fill_checkout_form(data)
        self.click_purchase()
        self.verify_order_confirmation()
        confirmation = self.get_order_confirmation()
        self.close_confirmation()
        return confirmation

    @step("Verify home success")
    def verify_home_success(self):
        self.actions.wait_for_visible(self.locators.home_nav_link)
