from playwright.sync_api import Locator
from locators.common_locators import lowercase_xpath
from locators.locator_registry import LocatorRegistry

DELETE_LINK = 'a[contains(text(),"Delete")]'


class CartLocators(LocatorRegistry):

    selectors = {
        "cart_table": '//table[@class="table table-bordered table-hover table-striped"]',
        # Rows get the "success" class once rendered from the cart API response
        "cart_item_row": '//tbody[@id="tbodyid"]/tr[contains(@class,"success")]',
        "delete_buttons": f'//tbody[@id="tbodyid"]//{DELETE_LINK}',
        "cart_total": '//h3[@id="totalp"]',
        "place_order_button": '//button[contains(text(),"Place Order")]',
    }

    templates = {
        "cart_row_by_product_name":
            f'//tbody[@id="tbodyid"]/tr[td[{lowercase_xpath("text()")}=#KEYWORD]]',
        "delete_button_by_product_name":
            f'//tbody[@id="tbodyid"]/tr[td[{lowercase_xpath("text()")}=#KEYWORD]]//{DELETE_LINK}',
    }

    @staticmethod
    def cart_item_name(row: Locator) -> Locator:
        return row.locator("xpath=./td[2]")

    @staticmethod
    def cart_item_price(row: Locator) -> Locator:
        return row.locator("xpath=./td[3]")

    @staticmethod
    def delete_button_in_row(row: Locator) -> Locator:
        return row.locator(f"xpath=.//{DELETE_LINK}")

    def cart_row_by_product_name(self, product_name: str) -> Locator:
        return self.by_keyword("cart_row_by_product_name", product_name.strip().lower())

    def delete_button_by_product_name(self, product_name: str) -> Locator:
        return self.by_keyword("delete_button_by_product_name", product_name.strip().lower())
