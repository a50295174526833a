# consolebar/config.py
# Configuration constants (tweak as needed)

DISPLAY_CHUNKS = 20
TICK_INTERVAL = 1 / 8.0  # seconds between frames
SPINNER_CHARS = "|/-\\"
FILL_CHAR = "#"
EMPTY_CHAR = "-"
DONE_TEXT = "Done"
PROGRESS_PRECISION = 3  # rounding digits, hides float noise between frames
LOG_FILE = "consolebar.log"
DEMO_STEPS = 500
DEMO_DELAY = 0.01
