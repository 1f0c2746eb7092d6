WINDOW_WIDTH = 1000
WINDOW_HEIGHT = 760
WINDOW_TITLE = "Sort Visualizer"
FPS = 60

# Row geometry. Each node sits in a wrapper whose width is the larger of the
# node diameter and the label width; wrappers are separated by NODE_GAP.
ROW_TOP_Y = 600
ROW_HEIGHT = 90
ROW_SIDE_MARGIN = 20
NODE_GAP = 10
LABEL_MIN_WIDTH = 28
LABEL_OFFSET = 18
LABEL_FONT_SIZE = 11

# Node diameter range in pixels, scaled from the array's value range.
NODE_MIN_SIZE = 12
NODE_SIZE_SPAN = 48

# Random array generation.
DEFAULT_ARRAY_SIZE = 8
RANDOM_VALUE_MIN = 10
RANDOM_VALUE_MAX = 109
MAX_ELEMENTS = 200

# Timings (seconds on the tick clock).
STEP_DELAY = 0.05          # pause before each comparison
MERGE_STEP_DELAY = 0.03    # pause between adjacent exchanges of a merge walk
EXCHANGE_DURATION = 0.26   # FLIP play duration
EXCHANGE_SETTLE = 0.03     # extra wait before resync
FRESH_HIGHLIGHT_DURATION = 0.42

# Colors (RGB).
BACKGROUND_COLOR = (17, 17, 27)
NODE_COLOR = (90, 140, 230)
COMPARE_COLOR = (235, 200, 70)
PIVOT_COLOR = (210, 90, 210)
SORTED_COLOR = (70, 200, 110)
SWAPPING_COLOR = (240, 120, 60)
FRESH_COLOR = (120, 230, 140)
LABEL_COLOR = (200, 200, 215)
STATUS_COLOR = (144, 238, 144)
STATUS_ERROR_COLOR = (250, 128, 114)
HELP_COLOR = (110, 110, 135)
