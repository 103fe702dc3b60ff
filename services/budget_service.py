from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Iterable
from models.budget import Budget
from services.budget_progress import ProgressLevel, progress, progress_level
from services.data_service import DataService
from utils.currency import to_amount
from utils.date_helpers import current_month, first_of_month, same_month


BUDGET_MESSAGE = "Please enter a valid amount and category."


@dataclass(frozen=True)
class BudgetStatus:
    budget: Budget
    spent: Decimal
    progress: Decimal       # 0..100
    level: ProgressLevel

    @property
    def remaining(self) -> Decimal:
        return max(Decimal("0"), self.budget.amount - self.spent)


class BudgetService:
    def __init__(self, data_service: DataService):
        self._data = data_service

    def create(
        self, category: str, amount: Decimal, month: date | None = None
    ) -> Budget | None:
        """Validate and store. None when the write was refused (offline)."""
        if amount is None or not category:
            raise ValueError(BUDGET_MESSAGE)
        try:
            amount = to_amount(amount)
        except ValueError:
            raise ValueError(BUDGET_MESSAGE)
        if amount <= 0:
            raise ValueError(BUDGET_MESSAGE)
        budget = Budget(
            category=category,
            amount=amount,
            month=first_of_month(month) if month else current_month(),
        )
        return budget if self._data.add_budget(budget) else None

    def delete(self, budget_id: str) -> bool:
        return self._data.delete_budget(budget_id)

    def find(self, budget_id: str) -> Budget | None:
        if not budget_id:
            return None
        return self._data.get_budget(budget_id)

    def get_progress(self, category: str, month: date, budgets: Iterable[Budget]) -> Decimal:
        return progress(category, month, budgets, self._data.get_spending_for_category)

    def get_budget_status(self, budgets: Iterable[Budget], month: date) -> list[BudgetStatus]:
        """Budgets of the given month with spent amount and progress filled in."""
        budgets = list(budgets)
        statuses = []
        for b in budgets:
            if not same_month(b.month, month):
                continue
            spent = self._data.get_spending_for_category(b.category, b.month)
            pct = self.get_progress(b.category, b.month, budgets)
            statuses.append(BudgetStatus(b, spent, pct, progress_level(pct)))
        return statuses
