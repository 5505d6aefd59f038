"""Global constants for the application."""

# Canvas defaults (iPhone-sized portrait)
DEFAULT_WIDTH = 390
DEFAULT_HEIGHT = 844

# Grid topology
DAYS_PER_WEEK = 7
DAYS_PER_ROW = 14  # Two weeks per row
GAP_COLUMN = 7  # Column separating the two weeks of a row
GRID_COLUMNS = 15  # 7 days + 1 gap + 7 days

# Card placement, as fractions of the canvas
CARD_WIDTH_RATIO = 0.75
CARD_HEIGHT_RATIO = 0.48
CARD_TOP_RATIO = 0.35
CARD_PADDING_RATIO = 0.04  # Of min(card width, card height), also the corner radius

# Dot sizing
GAP_DIVISOR = 4  # Cells per gap along each axis
DOT_SIZE_RATIO = 1.5  # Dot diameter relative to the uniform gap
FUTURE_SIZE_FACTOR = 1.0
TODAY_SIZE_FACTOR = 1.8
PAST_SIZE_FACTOR = 1.0
CROSS_STROKE_RATIO = 0.2  # Cross stroke width relative to its size
CROSS_ARM_RATIO = 0.4  # Cross half-diagonal relative to its size
FUTURE_RADIUS_RATIO = 0.4  # Future dots leave a margin inside their cell
TODAY_RADIUS_RATIO = 0.5

# Label placement
LABEL_OFFSET_RATIO = 0.025  # Gap between card and label, of the card height
LABEL_FONT_RATIO = 0.025  # Of min(canvas width, canvas height)
LABEL_BASELINE_OFFSET = 12  # Pixels from the label top to the SVG baseline

# Raster limits
MAX_SUPERSAMPLED_PIXELS = 4096 * 4096  # Supersampling drops to fit under this pixel count
