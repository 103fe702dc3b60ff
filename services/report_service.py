from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from models.spending import CategorySpending, MonthlySpending
from services.aggregation import compute_category_spending, compute_monthly_spending
from services.data_service import DataService
from services.notifier import Notifier
from utils.date_helpers import current_month, first_of_month
from utils.logging_setup import get_logger

logger = get_logger("finance_tracker.reports")


@dataclass(frozen=True)
class Report:
    month: date
    category_spendings: tuple[CategorySpending, ...]
    monthly_spendings: tuple[MonthlySpending, ...]

    @property
    def total_spent(self) -> Decimal:
        return sum((m.amount for m in self.monthly_spendings), Decimal("0"))

    @property
    def month_spent(self) -> Decimal:
        """Current month's expenses across all categories."""
        return self.monthly_spendings[-1].amount if self.monthly_spendings else Decimal("0")


class ReportService:
    def __init__(self, data_service: DataService, notifier: Notifier):
        self._data = data_service
        self._notifier = notifier

    def load_report(self, month: date | None = None) -> Report | None:
        """Re-fetch everything and aggregate. None after a reported failure."""
        m = first_of_month(month) if month else current_month()
        try:
            budgets = self._data.get_budgets()
            transactions = self._data.get_transactions()
            report = Report(
                month=m,
                category_spendings=tuple(compute_category_spending(transactions, budgets, m)),
                monthly_spendings=tuple(compute_monthly_spending(transactions, m)),
            )
        except Exception:
            logger.exception("Failed to build report for %s", m)
            self._notifier.error()
            return None
        logger.debug(
            "Report %s: %d categories, %d months",
            m, len(report.category_spendings), len(report.monthly_spendings),
        )
        return report
