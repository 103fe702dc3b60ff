import os
import sys
import customtkinter as ctk

# Ensure project root is on sys.path when run directly
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from database.db_manager import DatabaseManager
from database.transaction_dao import TransactionDAO
from database.budget_dao import BudgetDAO

from services.connectivity import connectivity_from_config
from services.notifier import Notifier
from services.data_service import DataService
from services.ledger_service import LedgerService, LedgerSnapshot
from services.transaction_service import TransactionService
from services.budget_service import BudgetService
from services.report_service import ReportService

from ui.app_window import AppWindow
from utils.app_config import get_db_folder, get_log_level
from utils.logging_setup import configure_logging, get_logger


def main():
    # ── Bootstrap: logging and DB folder from pre-DB config ──────────────────
    configure_logging(get_log_level())
    logger = get_logger("finance_tracker.main")

    # ── Database ─────────────────────────────────────────────────────────────
    db = DatabaseManager.in_folder(get_db_folder())

    # ── DAOs ─────────────────────────────────────────────────────────────────
    tx_dao = TransactionDAO(db)
    budget_dao = BudgetDAO(db)

    # ── Services ─────────────────────────────────────────────────────────────
    notifier = Notifier()
    data_svc = DataService(db, tx_dao, budget_dao, connectivity_from_config(), notifier)
    ledger_svc = LedgerService(data_svc, notifier)
    tx_svc = TransactionService(data_svc)
    budget_svc = BudgetService(data_svc)
    report_svc = ReportService(data_svc, notifier)

    # ── Explicit initialization before the first query ───────────────────────
    ledger_svc.initialize()
    snapshot = ledger_svc.load() or LedgerSnapshot()
    logger.info(
        "Starting with %d transactions and %d budgets (%s)",
        len(snapshot.transactions), len(snapshot.budgets), db.db_path,
    )

    # ── Appearance ───────────────────────────────────────────────────────────
    ctk.set_appearance_mode(db.get_setting("appearance_mode", "system"))
    ctk.set_default_color_theme("blue")

    # ── Launch UI ────────────────────────────────────────────────────────────
    app = AppWindow(
        ledger_service=ledger_svc,
        tx_service=tx_svc,
        budget_service=budget_svc,
        report_service=report_svc,
        notifier=notifier,
        db=db,
        snapshot=snapshot,
        date_format=db.get_setting("date_format", "MM/DD/YYYY"),
    )
    app.mainloop()


if __name__ == "__main__":
    main()
