BASE_URL = "https://www.demoblaze.com/"

# Placeholder replaced with a runtime value in locator templates
KEYWORD_PLACEHOLDER = "#KEYWORD"

# Explicit wait budget in milliseconds
DEFAULT_TIMEOUT = 20000

# Routes
CART_URL_PATTERN = r"cart\.html"
HOME_URL_PATTERN = r"(index\.html|demoblaze\.com/?$)"

# Enablement polling
ENABLE_POLL_ATTEMPTS = 10
ENABLE_POLL_INTERVAL = 500

RETRY_CLICK_ATTEMPTS = 3

# Settle delays (ms), overridable from config.json
CART_SETTLE_DELAY = 3000
ADD_TO_CART_SETTLE_DELAY = 1000
CONFIRMATION_CLOSE_DELAY = 5000

ORDER_CONFIRMATION_MESSAGE = "Thank you for your purchase!"
