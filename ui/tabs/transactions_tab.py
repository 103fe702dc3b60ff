import customtkinter as ctk
from models.transaction import Transaction
from services.ledger_service import LedgerSnapshot
from services.transaction_service import TransactionService
from ui.components.confirm_dialog import ConfirmDialog
from ui.components.transaction_detail import TransactionDetailDialog
from ui.components.transaction_form import TransactionForm
from utils.currency import format_currency
from utils.date_helpers import format_display_date


_MAX_RENDERED_ROWS = 100

_COLUMNS = [("Date", 90), ("Category", 130), ("Type", 80), ("Amount", 100),
            ("Notes", 220), ("Actions", 180)]


class TransactionsTab(ctk.CTkFrame):
    def __init__(
        self,
        master,
        tx_service: TransactionService,
        get_snapshot,           # callable → LedgerSnapshot
        notify_refresh,         # callable(scope)
        on_deleted,             # callable(tx_id)
        date_format: str = "MM/DD/YYYY",
        **kwargs,
    ):
        super().__init__(master, fg_color="transparent", **kwargs)
        self._svc = tx_service
        self._get_snapshot = get_snapshot
        self._notify_refresh = notify_refresh
        self._on_deleted = on_deleted
        self._date_format = date_format

        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(2, weight=1)

        self._build_toolbar()
        self._build_header()
        self._build_list()
        self._load()

    def refresh(self):
        self._load()

    def _build_toolbar(self):
        bar = ctk.CTkFrame(self, fg_color=("gray88", "gray18"), corner_radius=8)
        bar.grid(row=0, column=0, sticky="ew", padx=8, pady=(8, 0))
        self._count_label = ctk.CTkLabel(bar, text="", text_color="gray60")
        self._count_label.pack(side="left", padx=12, pady=6)
        ctk.CTkButton(bar, text="+ Transaction", command=self._open_add).pack(
            side="right", padx=8, pady=6
        )

    def _build_header(self):
        hdr = ctk.CTkFrame(self, fg_color=("gray82", "gray22"), corner_radius=0)
        hdr.grid(row=1, column=0, sticky="ew", padx=8, pady=(4, 0))
        for col, (text, width) in enumerate(_COLUMNS):
            ctk.CTkLabel(
                hdr, text=text, width=width, anchor="w",
                font=ctk.CTkFont(weight="bold"),
            ).grid(row=0, column=col, padx=4, pady=4)

    def _build_list(self):
        self._scroll = ctk.CTkScrollableFrame(self)
        self._scroll.grid(row=2, column=0, sticky="nsew", padx=8, pady=(0, 8))

    def _load(self):
        for w in self._scroll.winfo_children():
            w.destroy()

        snapshot: LedgerSnapshot = self._get_snapshot()
        transactions = snapshot.transactions
        shown = transactions[:_MAX_RENDERED_ROWS]
        self._count_label.configure(
            text=f"{len(transactions)} transaction{'s' if len(transactions) != 1 else ''}"
        )
        if not transactions:
            ctk.CTkLabel(
                self._scroll,
                text="No transactions yet. Click '+ Transaction' to add one.",
                text_color="gray60",
            ).grid(row=0, column=0, pady=40)
            return

        for idx, tx in enumerate(shown):
            self._add_row(idx, tx)

    def _add_row(self, idx: int, tx: Transaction):
        color = "#4CAF50" if tx.is_income else "#F44336"
        values = [
            format_display_date(tx.date, self._date_format),
            tx.category,
            tx.type_label,
            format_currency(tx.amount),
            tx.notes or "",
        ]
        for col, value in enumerate(values):
            ctk.CTkLabel(
                self._scroll, text=value, width=_COLUMNS[col][1], anchor="w",
                text_color=color if col == 3 else None,
            ).grid(row=idx, column=col, padx=4, pady=2, sticky="w")

        actions = ctk.CTkFrame(self._scroll, fg_color="transparent")
        actions.grid(row=idx, column=len(values), padx=4, pady=2, sticky="w")
        for text, cmd in (
            ("View", lambda t=tx: self._open_detail(t)),
            ("Edit", lambda t=tx: self._open_edit(t)),
            ("Delete", lambda t=tx: self._delete(t)),
        ):
            ctk.CTkButton(
                actions, text=text, width=54, height=24,
                fg_color="transparent", border_width=1,
                text_color=("gray10", "gray90"),
                command=cmd,
            ).pack(side="left", padx=2)

    def _open_add(self):
        form = TransactionForm(self.winfo_toplevel(), self._svc, date_format=self._date_format)
        self.wait_window(form)
        if form.saved:
            self._notify_refresh("transaction")
            TransactionDetailDialog(self.winfo_toplevel(), self._svc.get_detail(form.saved.id))

    def _open_edit(self, tx: Transaction):
        form = TransactionForm(
            self.winfo_toplevel(), self._svc,
            transaction=self._svc.get_for_edit(tx.id),
            date_format=self._date_format,
        )
        self.wait_window(form)
        if form.saved:
            self._notify_refresh("transaction")

    def _open_detail(self, tx: Transaction):
        TransactionDetailDialog(self.winfo_toplevel(), self._svc.get_detail(tx.id))

    def _delete(self, tx: Transaction):
        dlg = ConfirmDialog(
            self.winfo_toplevel(), "Delete Transaction",
            f"Delete {tx.category} {format_currency(tx.amount)} "
            f"on {format_display_date(tx.date, self._date_format)}?",
        )
        if dlg.result and self._svc.delete(tx.id):
            self._on_deleted(tx.id)
