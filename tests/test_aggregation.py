from datetime import date
from decimal import Decimal

from models.budget import Budget
from models.spending import CategorySpending, MonthlySpending
from models.transaction import Transaction
from services.aggregation import (
    budget_categories,
    compute_category_spending,
    compute_monthly_spending,
)

JAN = date(2025, 1, 1)


def tx(category, amount, d, is_income=False):
    return Transaction(category=category, amount=Decimal(str(amount)), date=d, is_income=is_income)


def budget(category, amount, month=JAN):
    return Budget(category=category, amount=Decimal(str(amount)), month=month)


# ── compute_category_spending ────────────────────────────────────────────────

def test_groceries_scenario():
    budgets = [budget("Groceries", 200)]
    transactions = [
        tx("Groceries", 50, date(2025, 1, 5)),
        tx("Groceries", 30, date(2025, 1, 20)),
        tx("Salary", 1000, date(2025, 1, 1), is_income=True),
    ]

    result = compute_category_spending(transactions, budgets, JAN)

    assert result == [CategorySpending("Groceries", Decimal("80"))]


def test_categories_follow_first_occurrence_in_budgets():
    budgets = [
        budget("Transport", 100),
        budget("Groceries", 200),
        budget("Transport", 120, date(2025, 2, 1)),
        budget("Utilities", 90),
    ]

    result = compute_category_spending([], budgets, JAN)

    assert [r.category for r in result] == ["Transport", "Groceries", "Utilities"]
    assert all(r.amount == 0 for r in result)


def test_unbudgeted_spending_is_omitted():
    budgets = [budget("Groceries", 200)]
    transactions = [
        tx("Groceries", 20, date(2025, 1, 3)),
        tx("Dining Out", 75, date(2025, 1, 4)),
    ]

    result = compute_category_spending(transactions, budgets, JAN)

    assert result == [CategorySpending("Groceries", Decimal("20"))]


def test_no_budgets_means_empty_report():
    transactions = [tx("Groceries", 20, date(2025, 1, 3))]

    assert compute_category_spending(transactions, [], JAN) == []


def test_only_current_month_expenses_count():
    budgets = [budget("Groceries", 200)]
    transactions = [
        tx("Groceries", 10, date(2025, 1, 31)),
        tx("Groceries", 99, date(2025, 2, 1)),
        tx("Groceries", 77, date(2024, 1, 15)),
        tx("Groceries", 500, date(2025, 1, 10), is_income=True),
    ]

    result = compute_category_spending(transactions, budgets, JAN)

    assert result == [CategorySpending("Groceries", Decimal("10"))]


def test_category_match_is_case_sensitive():
    budgets = [budget("Groceries", 200)]
    transactions = [tx("groceries", 40, date(2025, 1, 2))]

    result = compute_category_spending(transactions, budgets, JAN)

    assert result == [CategorySpending("Groceries", Decimal("0"))]


def test_inputs_are_not_mutated():
    budgets = [budget("Groceries", 200), budget("Groceries", 300)]
    transactions = [tx("Groceries", 40, date(2025, 1, 2))]
    budgets_before = list(budgets)
    transactions_before = list(transactions)

    compute_category_spending(transactions, budgets, JAN)
    compute_monthly_spending(transactions, JAN)

    assert budgets == budgets_before
    assert transactions == transactions_before


def test_budget_categories_dedupes():
    budgets = [budget("A", 1), budget("B", 1), budget("A", 2)]

    assert budget_categories(budgets) == ["A", "B"]


# ── compute_monthly_spending ─────────────────────────────────────────────────

def test_single_month_of_data_is_zero_filled():
    transactions = [tx("Rent", 500, date(2025, 1, 10))]

    result = compute_monthly_spending(transactions, date(2025, 6, 1))

    assert [m.amount for m in result] == [Decimal("500")] + [Decimal("0")] * 5
    assert [m.month for m in result] == [date(2025, m, 1) for m in range(1, 7)]


def test_window_crosses_year_boundary():
    result = compute_monthly_spending([], date(2025, 2, 1))

    assert [m.month for m in result] == [
        date(2024, 9, 1), date(2024, 10, 1), date(2024, 11, 1),
        date(2024, 12, 1), date(2025, 1, 1), date(2025, 2, 1),
    ]
    assert all(m.amount == 0 for m in result)


def test_monthly_spending_ignores_income_and_out_of_window():
    transactions = [
        tx("Groceries", 10, date(2025, 3, 31)),
        tx("Groceries", 20, date(2025, 4, 1)),
        tx("Salary", 3000, date(2025, 4, 1), is_income=True),
        tx("Groceries", 999, date(2024, 12, 31)),
        tx("Groceries", 888, date(2025, 7, 1)),
    ]

    result = compute_monthly_spending(transactions, date(2025, 6, 1))

    assert result == [
        MonthlySpending(date(2025, 1, 1), Decimal("0")),
        MonthlySpending(date(2025, 2, 1), Decimal("0")),
        MonthlySpending(date(2025, 3, 1), Decimal("10")),
        MonthlySpending(date(2025, 4, 1), Decimal("20")),
        MonthlySpending(date(2025, 5, 1), Decimal("0")),
        MonthlySpending(date(2025, 6, 1), Decimal("0")),
    ]


def test_mid_month_reference_date_is_normalized():
    transactions = [tx("Groceries", 15, date(2025, 6, 1))]

    result = compute_monthly_spending(transactions, date(2025, 6, 18))

    assert len(result) == 6
    assert result[-1] == MonthlySpending(date(2025, 6, 1), Decimal("15"))
