import pytest
from pages.product_page import ProductPage


@pytest.fixture
def product_page(actions):
    product_page = ProductPage(actions)
    actions.reset_mock()
    return product_page


def test_add_to_cart_clicks_inside_dialog_wait_and_settles(actions, product_page):
    events = []

    def wait_for_dialog(trigger):
        events.append("listen")
        trigger()
        return "Product added."

    actions.wait_for_dialog.side_effect = wait_for_dialog
    actions.click.side_effect = lambda locator: events.append("click")
    actions.settle.side_effect = lambda ms, reason: events.append(f"settle {ms}")

    assert product_page.add_to_cart() == "Product added."
    assert events == ["listen", "click", "settle 1000.0"]
    actions.click.assert_called_once_with(product_page.locators.add_to_cart_button)


@pytest.mark.parametrize("text,expected", [
    ("$790 *includes tax", 790.0),
    ("$1100 *includes tax", 1100.0),
    ("", 0.0),
])
def test_get_product_price(actions, product_page, text, expected):
    actions.get_text.return_value = text

    assert product_page.get_product_price() == expected
    actions.get_text.assert_called_once_with(product_page.locators.product_price)


def test_get_product_name_strips(actions, product_page):
    actions.get_text.return_value = " Sony vaio i5\n"
    assert product_page.get_product_name() == "Sony vaio i5"


def test_verify_product_details_without_price(actions, product_page):
    actions.get_text.return_value = "Nexus 6"

    assert product_page.verify_product_details("Nexus 6")
    actions.get_text.assert_called_once_with(product_page.locators.product_name)


def test_verify_product_details_collects_both_mismatches(actions, product_page):
    actions.get_text.side_effect = lambda locator: {
        product_page.locators.product_name: "Nexus 6",
        product_page.locators.product_price: "$650 *includes tax",
    }[locator]

    assert not product_page.verify_product_details("Nexus 7", 700)
    assert actions.soft.errors == [
        "Product name: expected 'Nexus 7', got 'Nexus 6'",
        "Product price: expected 700, got 650.0",
    ]


def test_navigate_home(actions, product_page):
    product_page.navigate_home()
    actions.click.assert_called_once_with(product_page.locators.home_nav_link)
