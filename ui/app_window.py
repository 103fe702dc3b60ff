import customtkinter as ctk
from database.db_manager import DatabaseManager
from services.budget_service import BudgetService
from services.ledger_service import LedgerService, LedgerSnapshot
from services.notifier import Notice, Notifier
from services.report_service import ReportService
from services.transaction_service import TransactionService
from ui.components.alert_banner import AlertBanner
from ui.tabs.budgets_tab import BudgetsTab
from ui.tabs.reports_tab import ReportsTab
from ui.tabs.transactions_tab import TransactionsTab
from utils.constants import APP_NAME, APP_WIDTH, APP_HEIGHT
from utils.logging_setup import get_logger

logger = get_logger("finance_tracker.ui.app")

TAB_NAMES = ["Transactions", "Budgets", "Reports"]

_REFRESH_SCOPES: dict[str, set[str]] = {
    "transaction": {"transactions", "budgets", "reports"},
    "budget":      {"budgets", "reports"},
    "full":        {"transactions", "budgets", "reports"},
}

_MAX_BANNERS = 3


class AppWindow(ctk.CTk):
    def __init__(
        self,
        ledger_service: LedgerService,
        tx_service: TransactionService,
        budget_service: BudgetService,
        report_service: ReportService,
        notifier: Notifier,
        db: DatabaseManager,
        snapshot: LedgerSnapshot,
        date_format: str = "MM/DD/YYYY",
        **kwargs,
    ):
        super().__init__(**kwargs)
        self._ledger = ledger_service
        self._tx_svc = tx_service
        self._budget_svc = budget_service
        self._report_svc = report_service
        self._notifier = notifier
        self._db = db
        self._snapshot = snapshot
        self._date_format = date_format

        self.title(APP_NAME)
        self.minsize(APP_WIDTH, APP_HEIGHT)
        self.geometry(f"{APP_WIDTH}x{APP_HEIGHT}")

        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(1, weight=1)

        self._build_banner_area()
        # Before the tabs: their first load may already report an error.
        self._notifier.subscribe(self._show_notice)
        self._build_tabs()

        self.protocol("WM_DELETE_WINDOW", self._on_close)

    def get_snapshot(self) -> LedgerSnapshot:
        return self._snapshot

    # ── Layout ───────────────────────────────────────────────────────────────
    def _build_banner_area(self):
        self._banner_frame = ctk.CTkFrame(self, fg_color="transparent", height=0)
        self._banner_frame.grid(row=0, column=0, sticky="ew", padx=8)

    def _build_tabs(self):
        self._tabview = ctk.CTkTabview(self)
        self._tabview.grid(row=1, column=0, sticky="nsew", padx=8, pady=(0, 8))
        for tab_name in TAB_NAMES:
            self._tabview.add(tab_name)
            self._tabview.tab(tab_name).grid_columnconfigure(0, weight=1)
            self._tabview.tab(tab_name).grid_rowconfigure(0, weight=1)

        self._transactions_tab = TransactionsTab(
            self._tabview.tab("Transactions"),
            tx_service=self._tx_svc,
            get_snapshot=self.get_snapshot,
            notify_refresh=self.notify_tabs_refresh,
            on_deleted=self._on_transaction_deleted,
            date_format=self._date_format,
        )
        self._transactions_tab.grid(row=0, column=0, sticky="nsew")

        self._budgets_tab = BudgetsTab(
            self._tabview.tab("Budgets"),
            budget_service=self._budget_svc,
            get_snapshot=self.get_snapshot,
            notify_refresh=self.notify_tabs_refresh,
            on_deleted=self._on_budget_deleted,
        )
        self._budgets_tab.grid(row=0, column=0, sticky="nsew")

        self._reports_tab = ReportsTab(
            self._tabview.tab("Reports"),
            report_service=self._report_svc,
        )
        self._reports_tab.grid(row=0, column=0, sticky="nsew")

        last_tab = self._db.get_setting("last_tab", TAB_NAMES[0])
        if last_tab in TAB_NAMES:
            self._tabview.set(last_tab)

    # ── Refresh ──────────────────────────────────────────────────────────────
    def notify_tabs_refresh(self, scope: str = "full"):
        """Reload the snapshot, then redraw the tabs the change can affect.

        A failed reload keeps the previous snapshot on screen.
        """
        snapshot = self._ledger.load(self._snapshot.current_month)
        if snapshot is not None:
            self._snapshot = snapshot
        self._refresh_tabs(scope)

    def _refresh_tabs(self, scope: str):
        tabs = _REFRESH_SCOPES.get(scope, _REFRESH_SCOPES["full"])
        if "transactions" in tabs: self._transactions_tab.refresh()
        if "budgets"      in tabs: self._budgets_tab.refresh()
        if "reports"      in tabs: self._reports_tab.refresh()

    def _on_transaction_deleted(self, tx_id: str):
        self._snapshot = self._snapshot.without_transaction(tx_id)
        self._refresh_tabs("transaction")

    def _on_budget_deleted(self, budget_id: str):
        self._snapshot = self._snapshot.without_budget(budget_id)
        self._refresh_tabs("budget")

    # ── Notices & errors ─────────────────────────────────────────────────────
    def _show_notice(self, notice: Notice):
        banners = self._banner_frame.winfo_children()
        for old in banners[:max(0, len(banners) - _MAX_BANNERS + 1)]:
            old.destroy()
        AlertBanner(self._banner_frame, notice).pack(fill="x", pady=2)

    def report_callback_exception(self, exc, val, tb):
        # Tk routes exceptions raised in widget callbacks here.
        logger.error("Unhandled error in UI callback", exc_info=(exc, val, tb))
        self._notifier.error()

    def _on_close(self):
        self._db.set_setting("last_tab", self._tabview.get())
        self._notifier.unsubscribe(self._show_notice)
        self._db.close()
        self.destroy()
