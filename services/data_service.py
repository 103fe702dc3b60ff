"""Persistence gateway over the local SQLite store.

Reads go straight to the DAOs. Every write first asks the connectivity
oracle; when offline the write is skipped, a "No Internet" notice is sent
and the method returns False instead of raising.
"""
from datetime import date
from decimal import Decimal
from typing import Optional
from database.db_manager import DatabaseManager
from database.transaction_dao import TransactionDAO
from database.budget_dao import BudgetDAO
from models.transaction import Transaction
from models.budget import Budget
from services.connectivity import Connectivity
from services.notifier import Notifier
from utils.logging_setup import get_logger

logger = get_logger("finance_tracker.data_service")

NO_INTERNET_TITLE = "No Internet"


class DataService:
    def __init__(
        self,
        db: DatabaseManager,
        tx_dao: TransactionDAO,
        budget_dao: BudgetDAO,
        connectivity: Connectivity,
        notifier: Notifier,
    ):
        self._db = db
        self._tx_dao = tx_dao
        self._budget_dao = budget_dao
        self._connectivity = connectivity
        self._notifier = notifier

    def initialize(self):
        """Idempotent schema creation; must run before the first query."""
        self._db.initialize()

    def _require_online(self, action: str) -> bool:
        if self._connectivity.is_online():
            return True
        logger.warning("Offline: refused to %s", action)
        self._notifier.warning(
            NO_INTERNET_TITLE,
            f"You need an internet connection to {action}.",
        )
        return False

    # ── Transactions ─────────────────────────────────────────────────────────
    def get_transactions(self) -> list[Transaction]:
        return self._tx_dao.get_all()

    def get_transaction(self, tx_id: str) -> Optional[Transaction]:
        return self._tx_dao.get_by_id(tx_id)

    def add_transaction(self, tx: Transaction) -> bool:
        if not self._require_online("add transactions"):
            return False
        self._tx_dao.insert(tx)
        logger.debug(
            "Inserted transaction: %s, %s, Notes: %s",
            tx.id, tx.category, tx.notes or "None",
        )
        return True

    def update_transaction(self, tx: Transaction) -> bool:
        if not self._require_online("update transactions"):
            return False
        if not self._tx_dao.update(tx):
            logger.debug("Update matched no transaction: %s", tx.id)
            return True
        logger.debug("Updated transaction: %s, %s, Amount: %s", tx.id, tx.category, tx.amount)
        return True

    def delete_transaction(self, tx_id: str) -> bool:
        if not self._require_online("delete transactions"):
            return False
        self._tx_dao.delete(tx_id)
        logger.debug("Deleted transaction: %s", tx_id)
        return True

    # ── Budgets ──────────────────────────────────────────────────────────────
    def get_budgets(self) -> list[Budget]:
        return self._budget_dao.get_all()

    def get_budget(self, budget_id: str) -> Optional[Budget]:
        return self._budget_dao.get_by_id(budget_id)

    def add_budget(self, budget: Budget) -> bool:
        if not self._require_online("add budgets"):
            return False
        self._budget_dao.insert(budget)
        logger.debug(
            "Inserted budget: %s, %s, Amount: %s, Month: %s",
            budget.id, budget.category, budget.amount, budget.month,
        )
        return True

    def delete_budget(self, budget_id: str) -> bool:
        if not self._require_online("delete budgets"):
            return False
        self._budget_dao.delete(budget_id)
        logger.debug("Deleted budget: %s", budget_id)
        return True

    # ── Queries ──────────────────────────────────────────────────────────────
    def get_spending_for_category(self, category: str, month: date) -> Decimal:
        """Expense total for an exact category within month's (year, month)."""
        return self._tx_dao.get_spending_for_category(category, month)
