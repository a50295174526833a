# consolebar/terminal.py
"""Terminal capability detection and cursor visibility."""

HIDE_CURSOR = "\x1b[?25l"
SHOW_CURSOR = "\x1b[?25h"


def is_interactive(stream) -> bool:
    """True when `stream` is attached to a terminal (not piped or redirected)."""
    isatty = getattr(stream, "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except (ValueError, OSError):
        # closed or detached stream
        return False


def hide_cursor(stream) -> None:
    stream.write(HIDE_CURSOR)
    stream.flush()


def show_cursor(stream) -> None:
    stream.write(SHOW_CURSOR)
    stream.flush()
