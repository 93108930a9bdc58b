from locators.locator_registry import LocatorRegistry


class CheckoutLocators(LocatorRegistry):

    selectors = {
        "checkout_modal": 'xpath=//div[@id="orderModal"]',
        "name_input": 'xpath=//input[@id="name"]',
        "country_input": 'xpath=//input[@id="country"]',
        "city_input": 'xpath=//input[@id="city"]',
        "credit_card_input": 'xpath=//input[@id="card"]',
        "month_input": 'xpath=//input[@id="month"]',
        "year_input": 'xpath=//input[@id="year"]',
        "purchase_button": 'xpath=//button[@onclick="purchaseOrder()"]',
        "confirmation_modal":
            'xpath=//div[contains(@class,"sweet-alert") and contains(@class,"showSweetAlert")]',
        "confirmation_message": 'xpath=//h2[contains(text(),"Thank you for your purchase!")]',
        "confirmation_details": 'xpath=//p[contains(@class,"lead") and contains(@class,"text-muted")]',
        "confirmation_ok_button": 'xpath=//button[contains(text(),"OK")]',
    }
