from dataclasses import dataclass, field
from datetime import date
from models.budget import Budget
from models.transaction import Transaction
from services.data_service import DataService
from services.notifier import Notifier
from utils.date_helpers import current_month, first_of_month
from utils.logging_setup import get_logger

logger = get_logger("finance_tracker.ledger")


@dataclass(frozen=True)
class LedgerSnapshot:
    """Immutable view of everything the tabs display.

    Transactions are newest first; budgets keep store order.
    """
    transactions: tuple[Transaction, ...] = ()
    budgets: tuple[Budget, ...] = ()
    current_month: date = field(default_factory=current_month)

    def without_transaction(self, tx_id: str) -> "LedgerSnapshot":
        return LedgerSnapshot(
            tuple(t for t in self.transactions if t.id != tx_id),
            self.budgets,
            self.current_month,
        )

    def without_budget(self, budget_id: str) -> "LedgerSnapshot":
        return LedgerSnapshot(
            self.transactions,
            tuple(b for b in self.budgets if b.id != budget_id),
            self.current_month,
        )


class LedgerService:
    def __init__(self, data_service: DataService, notifier: Notifier):
        self._data = data_service
        self._notifier = notifier

    def initialize(self):
        """Explicit setup phase; call once before the first load()."""
        self._data.initialize()

    def load(self, month: date | None = None) -> LedgerSnapshot | None:
        """Fresh snapshot, or None after an unexpected failure (already reported).

        Callers keep whatever snapshot they had when this returns None.
        """
        try:
            transactions = sorted(
                self._data.get_transactions(), key=lambda t: t.date, reverse=True
            )
            budgets = self._data.get_budgets()
        except Exception:
            logger.exception("Failed to load transactions and budgets")
            self._notifier.error()
            return None
        logger.debug("Loaded %d transactions and %d budgets", len(transactions), len(budgets))
        return LedgerSnapshot(
            tuple(transactions),
            tuple(budgets),
            first_of_month(month) if month else current_month(),
        )
