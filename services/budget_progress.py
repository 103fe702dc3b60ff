from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Callable, Iterable, Optional
from models.budget import Budget
from utils.constants import (
    BUDGET_OVER_THRESHOLD, BUDGET_WARNING_THRESHOLD, PROGRESS_COLORS,
)
from utils.currency import to_decimal
from utils.date_helpers import same_month

SpendingLookup = Callable[[str, date], Decimal]

_HUNDRED = Decimal("100")


class ProgressLevel(str, Enum):
    NORMAL = "normal"
    WARNING = "warning"
    OVER = "over"

    @property
    def color(self) -> str:
        return PROGRESS_COLORS[self.value]


def find_budget(category: str, month: date, budgets: Iterable[Budget]) -> Optional[Budget]:
    return next(
        (b for b in budgets if b.category == category and same_month(b.month, month)),
        None,
    )


def progress(
    category: str,
    month: date,
    budgets: Iterable[Budget],
    spending_lookup: SpendingLookup,
) -> Decimal:
    """Percent of the month's allocation spent, clamped to [0, 100].

    0 when the category has no budget that month or the allocation is 0.
    """
    budget = find_budget(category, month, budgets)
    if budget is None:
        return Decimal("0")
    if budget.amount == 0:
        return Decimal("0")
    spent = to_decimal(spending_lookup(category, month))
    pct = spent / budget.amount * _HUNDRED
    return max(Decimal("0"), min(_HUNDRED, pct))


def progress_level(pct: Decimal | float) -> ProgressLevel:
    if pct >= BUDGET_OVER_THRESHOLD:
        return ProgressLevel.OVER
    if pct >= BUDGET_WARNING_THRESHOLD:
        return ProgressLevel.WARNING
    return ProgressLevel.NORMAL
