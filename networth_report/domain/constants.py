"""Domain constants for net worth analytics and reports."""

DEFAULT_TREND_MONTHS = 6

# Same-month snapshots are summed (False) rather than reduced to the latest
# snapshot per account (True). Summing approximates the month's asset value.
USE_LATEST_PER_ACCOUNT_PER_MONTH = False

TREND_MONTH_LABEL_FORMAT = "%b %Y"
TODAY_LABEL = "Today"

PRODUCT_LABEL = "Net Worth Projection Report"
DISCLAIMER = "Projections are estimates"

LINE_COLOR = (0, 200, 200)
POSITIVE_COLOR = (34, 197, 94)
NEGATIVE_COLOR = (239, 68, 68)
COMPARISON_B_COLOR = (139, 92, 246)
AXIS_COLOR = (100, 100, 100)
GRID_COLOR = (230, 230, 230)
BAND_COLOR = (150, 150, 150)
BOX_COLOR = (200, 200, 200)
FOOTER_COLOR = (150, 150, 150)
TEXT_COLOR = (0, 0, 0)

GRID_DIVISIONS = 4
X_LABEL_TARGET_COUNT = 6


__all__ = [
    "DEFAULT_TREND_MONTHS",
    "USE_LATEST_PER_ACCOUNT_PER_MONTH",
    "TREND_MONTH_LABEL_FORMAT",
    "TODAY_LABEL",
    "PRODUCT_LABEL",
    "DISCLAIMER",
    "LINE_COLOR",
    "POSITIVE_COLOR",
    "NEGATIVE_COLOR",
    "COMPARISON_B_COLOR",
    "AXIS_COLOR",
    "GRID_COLOR",
    "BAND_COLOR",
    "BOX_COLOR",
    "FOOTER_COLOR",
    "TEXT_COLOR",
    "GRID_DIVISIONS",
    "X_LABEL_TARGET_COUNT",
]
