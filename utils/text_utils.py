import re

PRICE_PATTERN = re.compile(r"\$?\s*(\d+(?:\.\d+)?)")
ORDER_ID_PATTERN = re.compile(r"Id:\s*(\d+)")
ORDER_AMOUNT_PATTERN = re.compile(r"Amount:\s*(\d+)\s*USD")


def parse_price(text: str | None) -> float:
    """
    Extract the leading numeric token from a price string.

    Args:
        text (str | None): Raw element text, e.g. "$790 *includes tax" or "360".

    Returns:
        float: Parsed price, or 0.0 when the text has no numeric prefix.
    """
    if not text:
        return 0.0

    match = PRICE_PATTERN.match(text.strip())
    return float(match.group(1)) if match else 0.0


def extract_order_id(text: str | None) -> str:
    """Return the order id from confirmation text, or an empty string."""
    match = ORDER_ID_PATTERN.search(text or "")
    return match.group(1) if match else ""


def extract_order_amount(text: str | None) -> float:
    """Return the order amount in USD from confirmation text, or 0.0."""
    match = ORDER_AMOUNT_PATTERN.search(text or "")
    return float(match.group(1)) if match else 0.0


def safe_filename(name: str) -> str:
    """
    Convert any string (like test names or parameterized values)
    into a filesystem-safe filename.
    Keeps letters, digits, underscore, dash, and dot only.
    """
    name = re.sub(r'[<>:"/\\|?*\s,=#@!%^&;{}()+\[\]]+', '_', name)
    name = re.sub(r'_+', '_', name)
    name = name.strip('._')
    # Limit length to avoid OS path length issues
    return name[:150]
