"""OS clipboard access via pyperclip."""

import logging

import pyperclip

logger = logging.getLogger(__name__)


def write_clipboard(text: str) -> bool:
    """Copy text to the system clipboard.

    Returns False, without raising, when no clipboard mechanism is
    available (headless servers, missing xclip/xsel...).
    """
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as e:
        logger.debug(f"Clipboard unavailable: {e}")
        return False
    return True
