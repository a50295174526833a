from .progress import ConsoleProgressBar
from .render import TextRenderer, clamp, compute_diff, format_progress
from .utils import get_logger, setup_logging

__all__ = [
    "ConsoleProgressBar",
    "TextRenderer",
    "clamp",
    "compute_diff",
    "format_progress",
    "get_logger",
    "setup_logging",
]
