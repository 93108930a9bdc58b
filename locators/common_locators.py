UPPERCASE = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
LOWERCASE = "abcdefghijklmnopqrstuvwxyz"


def lowercase_xpath(expression: str) -> str:
    """Wrap an XPath string expression so it compares case-insensitively."""
    return f'translate(normalize-space({expression}),"{UPPERCASE}","{LOWERCASE}")'


def xpath_literal(value: str) -> str:
    """Quote a string as an XPath 1.0 literal, using concat() when it holds both quote kinds."""
    if '"' not in value:
        return f'"{value}"'
    if "'" not in value:
        return f"'{value}'"
    parts = ", '\"', ".join(f'"{part}"' for part in value.split('"'))
    return f"concat({parts})"


# Navbar elements present on every DemoBlaze screen
COMMON_SELECTORS = {
    "home_nav_link": '//a[@class="nav-link" and contains(text(),"Home")]',
    "cart_nav_link": '//a[@id="cartur"]',
    "navbar_welcome_text": '//a[@id="nameofuser"]',
    "navbar_login_button": '//a[@id="login2"]',
    "navbar_logout_button": '//a[@id="logout2"]',
}

COMMON_TEMPLATES = {}
