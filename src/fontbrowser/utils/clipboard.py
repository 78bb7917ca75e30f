# src/fontbrowser/utils/clipboard.py

"""
A simple wrapper module for the 'pyperclip' library.

Used by the font browser to copy a font family name to the system clipboard.
Clipboard failures are logged and never interrupt the UI.
"""

import logging
import pyperclip

# Configure a logger for this module
logger = logging.getLogger(__name__)


def copy_to_clipboard(text: str) -> bool:
    """
    Copies the given text to the system clipboard.

    Args:
        text: The string to be copied to the clipboard.

    Returns:
        True if the text reached the clipboard, False otherwise.
    """
    if not isinstance(text, str) or not text:
        logger.warning("Attempted to copy an empty or invalid string to clipboard.")
        return False

    try:
        pyperclip.copy(text)
        logger.info(f"Successfully copied '{text}' to the system clipboard.")
        return True
    except pyperclip.PyperclipException as e:
        # No clipboard mechanism (headless session, or xclip/xsel missing on Linux)
        logger.error(f"Failed to copy text to clipboard. pyperclip error: {e}")
        return False
