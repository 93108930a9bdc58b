from locators.locator_registry import LocatorRegistry


class LoginLocators(LocatorRegistry):

    selectors = {
        "login_modal": '//div[@id="logInModal"]',
        "username_input": '//input[@id="loginusername"]',
        "password_input": '//input[@id="loginpassword"]',
        "modal_login_button": '//button[contains(text(),"Log in") and @onclick="logIn()"]',
    }
