# consolebar/render.py
"""
Frame formatting and minimal-redraw output.

The terminal is never cleared: each new frame is written by backing up to the
end of the prefix it shares with the previous frame and reprinting the rest.
Backspace moves the cursor without erasing, so a shorter frame also blanks the
leftover tail of the old one.
"""
import math

from . import config
from .utils import get_logger

logger = get_logger()

BACKSPACE = "\b"


def clamp(value) -> float:
    value = float(value)
    if math.isnan(value):
        return 0.0
    return max(0.0, min(1.0, value))


def format_progress(progress, block_count=config.DISPLAY_CHUNKS, spinner_index=0) -> str:
    """Render `[###---] 31.4% |` for a progress fraction in [0, 1]."""
    progress = round(progress, config.PROGRESS_PRECISION)
    filled = int(math.floor(progress * block_count))
    bar = config.FILL_CHAR * filled + config.EMPTY_CHAR * (block_count - filled)
    percent = progress * 100
    spinner = config.SPINNER_CHARS[spinner_index % len(config.SPINNER_CHARS)]
    return f"[{bar}] {percent:.1f}% {spinner}"


def common_prefix_length(a: str, b: str) -> int:
    n = min(len(a), len(b))
    i = 0
    while i < n and a[i] == b[i]:
        i += 1
    return i


def compute_diff(previous, text) -> str:
    """
    Characters that turn `previous` into `text` on screen, assuming the cursor
    sits right after `previous`. Returns "" when nothing changed.
    """
    previous = previous or ""
    if previous == text:
        return ""
    prefix = common_prefix_length(previous, text)
    out = [BACKSPACE * (len(previous) - prefix), text[prefix:]]
    overlap = len(previous) - len(text)
    if overlap > 0:
        # new text is shorter: blank the old tail, then step back over the blanks
        out.append(" " * overlap)
        out.append(BACKSPACE * overlap)
    return "".join(out)


class TextRenderer:
    """Owns the last displayed string and writes diffs against it to `stream`."""

    def __init__(self, stream):
        self.stream = stream
        self.current_text = ""

    def update_text(self, text):
        output = compute_diff(self.current_text, text)
        if not output:
            return False
        try:
            self.stream.write(output)
            self.stream.flush()
        except (OSError, ValueError):
            logger.exception("Terminal write failed")
            raise
        self.current_text = text
        return True

    def release(self):
        self.current_text = ""
