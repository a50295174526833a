# consolebar/demo.py
"""
Demo driver: runs a fake task and reports its progress to the bar.
"""
import sys
import time

from . import config
from .progress import ConsoleProgressBar
from .utils import get_logger, setup_logging


def run_demo(steps=config.DEMO_STEPS, delay=config.DEMO_DELAY, stream=None):
    stream = stream if stream is not None else sys.stdout
    logger = get_logger()
    logger.info("Starting demo run: %d steps, %.3fs each", steps, delay)
    stream.write("Performing task... ")
    stream.flush()
    with ConsoleProgressBar(stream=stream) as bar:
        for i in range(steps):
            bar.report((i + 1) / steps)
            time.sleep(delay)
    stream.write("\n")
    stream.flush()
    logger.info("Demo run finished")


def main():
    setup_logging(config.LOG_FILE)
    try:
        run_demo()
    except KeyboardInterrupt:
        print("\nInterrupted by user.")
        sys.exit(1)
