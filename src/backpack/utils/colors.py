"""ANSI color utility for terminal output.

Color strategy for the menu:
- Green: Successful insertions and removals
- Magenta: Errors and invalid input
- Yellow: Warnings, banners, headers
- Cyan: Search results
- White: Default text
"""


class Colors:
    """ANSI color codes for terminal output."""

    RESET = '\033[0m'

    # Normal colors
    YELLOW = '\033[0;33m'
    MAGENTA = '\033[0;35m'

    # Bold colors
    BOLD_GREEN = '\033[1;32m'
    BOLD_YELLOW = '\033[1;33m'
    BOLD_CYAN = '\033[1;36m'
    BOLD_WHITE = '\033[1;37m'


_enabled = True


def set_color_enabled(enabled: bool):
    """Turn ANSI output on or off for every helper in this module."""
    global _enabled
    _enabled = enabled


def colorize(text: str, color_code: str) -> str:
    """Apply color to text and reset afterward.

    Args:
        text: The text to colorize
        color_code: ANSI color code (e.g., Colors.BOLD_GREEN)

    Returns:
        Colored text with reset code
    """
    if not _enabled:
        return text
    return f"{color_code}{text}{Colors.RESET}"


def success_message(text: str) -> str:
    """Color for success messages (bold green)."""
    return colorize(text, Colors.BOLD_GREEN)


def error_message(text: str) -> str:
    """Color for errors and restrictions (normal magenta)."""
    return colorize(text, Colors.MAGENTA)


def warning_message(text: str) -> str:
    """Color for warnings (normal yellow)."""
    return colorize(text, Colors.YELLOW)


def item_found(text: str) -> str:
    """Color for search hits (bold cyan)."""
    return colorize(text, Colors.BOLD_CYAN)


def announcement(text: str) -> str:
    """Color for banners and headers (bold yellow)."""
    return colorize(text, Colors.BOLD_YELLOW)


def info_message(text: str) -> str:
    """Color for informational messages (white)."""
    return colorize(text, Colors.BOLD_WHITE)
