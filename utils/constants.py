APP_NAME = "Personal Finance Tracker"
APP_WIDTH = 1000
APP_HEIGHT = 700
DB_FILE = "finance.db"

DATE_FORMAT = "%Y-%m-%d"
MONTH_FORMAT = "%Y-%m"

TRANSACTION_CATEGORIES = [
    "Groceries", "Transport", "Salary", "Dining Out", "Entertainment", "Utilities",
]
BUDGET_CATEGORIES = [
    "Groceries", "Transport", "Dining Out", "Entertainment", "Utilities",
]

# ── Reports ──────────────────────────────────────────────────────────────────
REPORT_MONTHS = 6
BUDGET_WARNING_THRESHOLD = 80   # percent
BUDGET_OVER_THRESHOLD = 100     # percent

CHART_TOP_MARGIN = 70           # px reserved above the tallest bar/point
CHART_LABEL_OFFSET = 20         # px from the bottom edge to the label baseline
MIN_BAR_HEIGHT = 5
LABEL_ROTATION = -45            # degrees, month labels on the line chart
BAR_COLORS = ["#0000FF", "#008000", "#FF0000", "#800080"]
LINE_COLOR = "#0000FF"

PROGRESS_COLORS = {
    "normal":  "#4CAF50",
    "warning": "#FFC107",
    "over":    "#F44336",
}

SEVERITY_COLORS = {
    "error":   "#F44336",
    "warning": "#FF9800",
    "info":    "#2196F3",
}

DEFAULT_SETTINGS = [
    ("appearance_mode", "system"),
    ("date_format", "MM/DD/YYYY"),
]
