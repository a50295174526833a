# consolebar/progress.py
"""
ConsoleProgressBar: percentage bar plus spinner, redrawn in place at 8 Hz.

Callers only ever store a number through report(); all terminal output happens
on the ticker thread (or in dispose), serialized by a single lock.
"""
import atexit
import sys
import threading

from . import config
from .render import TextRenderer, clamp, format_progress
from .terminal import hide_cursor, is_interactive, show_cursor
from .utils import get_logger, vprint

logger = get_logger()


class ConsoleProgressBar:
    """
    Usage:
        with ConsoleProgressBar() as bar:
            for i in range(n):
                do_work(i)
                bar.report((i + 1) / n)
    """

    def __init__(self, display_chunks=config.DISPLAY_CHUNKS, stream=None,
                 interval=config.TICK_INTERVAL, interactive=None):
        self._display_chunks = int(display_chunks)
        self.interval = float(interval)
        self.stream = stream if stream is not None else sys.stdout
        self._interactive = is_interactive(self.stream) if interactive is None else bool(interactive)

        self._progress = 0.0
        self._animation_index = 0
        self._renderer = TextRenderer(self.stream)
        self._lock = threading.Lock()
        self._timer = None
        self._disposed = False
        self._cursor_hidden = False

        if self._interactive:
            hide_cursor(self.stream)
            self._cursor_hidden = True
            with self._lock:
                self._arm()
            vprint("Progress bar started:", self._display_chunks, "blocks,", self.interval, "s ticks")
        else:
            logger.info("Output is not a terminal; progress frames disabled.")
        # restore the cursor even if the caller never disposes
        atexit.register(self.dispose)

    @property
    def display_chunks(self):
        return self._display_chunks

    @property
    def interactive(self):
        return self._interactive

    @property
    def progress(self):
        return self._progress

    @property
    def disposed(self):
        return self._disposed

    def report(self, value):
        # plain store, never takes the lock
        self._progress = clamp(value)

    def _arm(self):
        # one-shot timer, re-armed after each frame so slow writes never overlap
        if self._timer is not None:
            self._timer.cancel()
        timer = threading.Timer(self.interval, self._tick)
        timer.daemon = True
        self._timer = timer
        timer.start()

    def _tick(self):
        with self._lock:
            if self._disposed:
                return
            progress = self._progress  # read once, report() may change it meanwhile
            text = format_progress(progress, self._display_chunks, self._animation_index)
            self._animation_index += 1
            self._renderer.update_text(text)
            self._arm()

    def dispose(self):
        with self._lock:
            if self._disposed:
                return
            self._disposed = True
            try:
                self._renderer.update_text(config.DONE_TEXT)
            finally:
                self._renderer.release()
                if self._timer is not None:
                    self._timer.cancel()
                    self._timer = None
                atexit.unregister(self.dispose)
                if self._cursor_hidden:
                    self._cursor_hidden = False
                    show_cursor(self.stream)
        vprint("Progress bar disposed at", format(self._progress * 100, ".1f") + "%")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.dispose()
        return False
