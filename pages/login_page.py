from common.constants import BASE_URL
from decorators.step_decorators import step
from locators.login_locators import LoginLocators
from wrappers.page_actions import PageActions


class LoginPage:

    def __init__(self, actions: PageActions):
        self.actions = actions
        self.locators = actions.register(LoginLocators)

    @step("Navigate to home page")
    def navigate_to_home_page(self):
        self.actions.navigate(self.actions.config.get("base_url") or BASE_URL)

    @step("Open login modal")
    def open_login_modal(self):
        self.actions.click(self.locators.navbar_login_button)
        self.actions.wait_for_visible(self.locators.login_modal)

    @step("Fill username")
    def fill_username(self, username: str):
        self.actions.fill(self.locators.username_input, username)

    @step("Fill password")
    def fill_password(self, password: str):
        self.actions.fill(self.locators.password_input, password)

    @step("Click login button in modal")
    def click_login_button(self):
        self.actions.click(self.locators.modal_login_button)
        self.actions.wait_for_hidden(self.locators.login_modal)

    @step(lambda username, **_: f"Complete login flow for {username}")
    def login(self, username: str, password: str):
        """
        Open the modal, enter the credentials and submit.

        Returns once the modal is hidden. That only means the modal closed,
        use verify_login_success() to check the session.
        """
        self.open_login_modal()
        self.fill_username(username)
        self.fill_password(password)
        self.click_login_button()

    @step("Verify login success")
    def verify_login_success(self, username: str):
        soft = self.actions.soft

        welcome_text = self.actions.get_text(self.locators.navbar_welcome_text)
        soft.contains(welcome_text, f"Welcome {username}", "Welcome text")
        soft.expect(self.locators.navbar_logout_button).to_be_visible()
        soft.expect(self.locators.navbar_login_button).to_be_hidden()

    @step("Logout")
    def logout(self):
        self.actions.click(self.locators.navbar_logout_button)
        self.actions.wait_for_visible(self.locators.navbar_login_button)

    @step("Verify logout success")
    def verify_logout_success(self):
        soft = self.actions.soft

        soft.expect(self.locators.navbar_login_button).to_be_visible()
        soft.expect(self.locators.navbar_logout_button).to_be_hidden()
