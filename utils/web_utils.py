from typing import Optional
from playwright.sync_api import Locator

HIGHLIGHT_STYLE = "outline: 2px solid red !important;"


def highlight_element(locator: Locator) -> Optional[str]:
    """
    Outlines the first matched element with a 2px solid red border.
    Returns the element's original 'style' attribute so it can be restored later.
    """
    return locator.first.evaluate(
        """(el, highlight) => {
            const original = el.getAttribute('style');
            el.setAttribute('style', (original || '') + '; ' + highlight);
            return original;
        }""",
        HIGHLIGHT_STYLE,
    )


def reset_element_style(locator: Locator, original_style: Optional[str]):
    """
    Restores an element's style attribute to its original value.
    Args:
        locator: The Playwright Locator for the element.
        original_style: The style string returned from highlight_element().
    """
    locator.first.evaluate(
        """(el, original) => {
            if (original === null) {
                el.removeAttribute('style');
            } else {
                el.setAttribute('style', original);
            }
        }""",
        original_style,
    )


def get_box_center(box: Optional[dict]) -> tuple[float, float]:
    """
    Returns the (x, y) center of a Playwright bounding box.
    Raises RuntimeError when the box is missing (element not rendered).
    """
    if not box:
        raise RuntimeError("Unable to get bounding box for drag and drop operation")

    return box["x"] + box["width"] / 2, box["y"] + box["height"] / 2
