"""Report aggregates computed from an already-loaded snapshot.

Pure functions: no I/O, inputs are never mutated.
"""
from datetime import date
from decimal import Decimal
from typing import Iterable
from models.budget import Budget
from models.spending import CategorySpending, MonthlySpending
from models.transaction import Transaction
from utils.constants import REPORT_MONTHS
from utils.date_helpers import add_months, first_of_month, same_month


def budget_categories(budgets: Iterable[Budget]) -> list[str]:
    """Distinct budget categories, first-seen order."""
    return list(dict.fromkeys(b.category for b in budgets))


def compute_category_spending(
    transactions: Iterable[Transaction],
    budgets: Iterable[Budget],
    current_month: date,
) -> list[CategorySpending]:
    """Current-month expense per budgeted category.

    Categories come from the budgets, not the transactions: spending in a
    category nobody budgeted for does not show up.
    """
    month_expenses = [
        t for t in transactions
        if same_month(t.date, current_month) and not t.is_income
    ]
    return [
        CategorySpending(
            category,
            sum((t.amount for t in month_expenses if t.category == category), Decimal("0")),
        )
        for category in budget_categories(budgets)
    ]


def compute_monthly_spending(
    transactions: Iterable[Transaction],
    current_month: date,
    months: int = REPORT_MONTHS,
) -> list[MonthlySpending]:
    """Expense totals for the trailing window ending at current_month, oldest first."""
    expenses = [t for t in transactions if not t.is_income]
    end = first_of_month(current_month)
    result = []
    for offset in range(months - 1, -1, -1):
        start = add_months(end, -offset)
        stop = add_months(start, 1)
        total = sum(
            (t.amount for t in expenses if start <= t.date < stop),
            Decimal("0"),
        )
        result.append(MonthlySpending(start, total))
    return result
