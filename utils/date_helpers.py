from datetime import date, datetime
import calendar
from utils.constants import DATE_FORMAT, MONTH_FORMAT

# ── Display date format options ───────────────────────────────────────────────

_STRFTIME_MAP = {
    "MM/DD/YYYY": "%m/%d/%Y",
    "DD/MM/YYYY": "%d/%m/%Y",
    "YYYY-MM-DD": "%Y-%m-%d",
    "DD.MM.YYYY": "%d.%m.%Y",
    "MM-DD-YYYY": "%m-%d-%Y",
}


def today() -> date:
    return date.today()


def first_of_month(d: date) -> date:
    return d.replace(day=1)


def current_month() -> date:
    """First day of the current month."""
    return first_of_month(date.today())


def same_month(a: date, b: date) -> bool:
    return a.year == b.year and a.month == b.month


def add_months(d: date, n: int) -> date:
    """Add n months to date d, clamping day to month end."""
    month = d.month - 1 + n
    year = d.year + month // 12
    month = month % 12 + 1
    max_day = calendar.monthrange(year, month)[1]
    return d.replace(year=year, month=month, day=min(d.day, max_day))


def parse_date(date_str: str) -> date | None:
    """Parse a date string in YYYY-MM-DD format, returning None on failure."""
    if not date_str:
        return None
    for fmt in ("%Y-%m-%d", "%Y/%m/%d", "%Y.%m.%d"):
        try:
            return datetime.strptime(date_str, fmt).date()
        except ValueError:
            continue
    return None


def format_date(d: date) -> str:
    return d.strftime(DATE_FORMAT)


def format_month(d: date) -> str:
    return d.strftime(MONTH_FORMAT)


def friendly_month(d: date) -> str:
    """e.g. 'February 2026'."""
    return d.strftime("%B %Y")


def short_month(d: date) -> str:
    """e.g. 'Feb'."""
    return d.strftime("%b")


def long_date(d: date) -> str:
    """e.g. 'Feb 03, 2026'."""
    return d.strftime("%b %d, %Y")


def format_display_date(d: date, fmt_key: str = "MM/DD/YYYY") -> str:
    return d.strftime(_STRFTIME_MAP.get(fmt_key, "%m/%d/%Y"))


def parse_display_date(display_str: str, fmt_key: str) -> date | None:
    """Parse a date in the given display format. Returns None on failure.

    Falls back to ISO 8601 (and its '/' or '.' separated variants).
    """
    if not display_str:
        return None
    raw = display_str.strip()
    try:
        return datetime.strptime(raw, _STRFTIME_MAP.get(fmt_key, "%m/%d/%Y")).date()
    except ValueError:
        return parse_date(raw)
