"""Derived report rows. Recomputed on every load, never persisted."""
from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class CategorySpending:
    category: str
    amount: Decimal


@dataclass(frozen=True)
class MonthlySpending:
    month: date         # 1st of the month
    amount: Decimal
