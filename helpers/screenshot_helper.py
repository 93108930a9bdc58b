import logging
from datetime import datetime
from pathlib import Path
from playwright.sync_api import Page
from utils.text_utils import safe_filename

SCREENSHOT_DIR = Path.cwd() / "reports" / "screenshots"

logger = logging.getLogger(__name__)


def take_screenshot(page: Page, name: str, directory: Path = SCREENSHOT_DIR) -> Path:
    """
    Save a full-page screenshot as {name}-yyyy-MM-dd-hh-mm-ss-sss.png.

    Args:
        page: Playwright page to capture.
        name: Screenshot name, made filesystem-safe.
        directory: Target folder, created when missing.

    Returns:
        Path: Location of the saved file.
    """
    directory.mkdir(parents=True, exist_ok=True)
    ts = datetime.now().strftime("%Y-%m-%d-%H-%M-%S-%f")[:-3]
    path = directory / f"{safe_filename(name)}-{ts}.png"

    page.screenshot(path=str(path), full_page=True)
    logger.info("Screenshot saved: %s", path)
    return path
