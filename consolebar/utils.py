# consolebar/utils.py
import logging
import os

_logger = None

def setup_logging(log_file=None, level=logging.INFO):
    global _logger
    logger = logging.getLogger("consolebar")
    logger.setLevel(level)
    # file handler only -> console is reserved for the bar
    if log_file:
        handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s"))
    else:
        handler = logging.NullHandler()
    # remove existing handlers
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()
    logger.addHandler(handler)
    _logger = logger
    if log_file:
        logger.info("Logging initialized. Log file: %s", os.path.abspath(log_file))
    return logger

def get_logger():
    global _logger
    if _logger is None:
        _logger = setup_logging()
    return _logger

def vprint(*args, **kwargs):
    # verbose print -> goes to logger.debug
    get_logger().debug(" ".join(str(a) for a in args))
