import customtkinter as ctk
from services.budget_service import BudgetService, BudgetStatus
from services.ledger_service import LedgerSnapshot
from ui.components.budget_form import BudgetForm
from ui.components.confirm_dialog import ConfirmDialog
from utils.currency import format_currency
from utils.date_helpers import add_months, friendly_month


class BudgetsTab(ctk.CTkFrame):
    def __init__(
        self,
        master,
        budget_service: BudgetService,
        get_snapshot,       # callable → LedgerSnapshot
        notify_refresh,     # callable(scope)
        on_deleted,         # callable(budget_id)
        **kwargs,
    ):
        super().__init__(master, fg_color="transparent", **kwargs)
        self._svc = budget_service
        self._get_snapshot = get_snapshot
        self._notify_refresh = notify_refresh
        self._on_deleted = on_deleted
        self._month = get_snapshot().current_month
        self._month_var = ctk.StringVar(value=friendly_month(self._month))

        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(1, weight=1)

        self._build_toolbar()
        self._build_list()
        self._load()

    def refresh(self):
        self._load()

    def _build_toolbar(self):
        bar = ctk.CTkFrame(self, fg_color=("gray88", "gray18"), corner_radius=8)
        bar.grid(row=0, column=0, sticky="ew", padx=8, pady=(8, 0))

        ctk.CTkButton(bar, text="◀", width=28, command=lambda: self._shift_month(-1)).pack(
            side="left", padx=(8, 0), pady=6
        )
        ctk.CTkLabel(
            bar, textvariable=self._month_var, width=130, anchor="center",
            font=ctk.CTkFont(size=13, weight="bold"),
        ).pack(side="left", padx=4)
        ctk.CTkButton(bar, text="▶", width=28, command=lambda: self._shift_month(1)).pack(
            side="left", padx=(0, 12)
        )
        ctk.CTkButton(bar, text="+ Add Budget", command=self._open_add).pack(side="left", padx=4)

    def _shift_month(self, n: int):
        self._month = add_months(self._month, n)
        self._month_var.set(friendly_month(self._month))
        self._load()

    def _build_list(self):
        self._scroll = ctk.CTkScrollableFrame(self)
        self._scroll.grid(row=1, column=0, sticky="nsew", padx=8, pady=8)
        self._scroll.grid_columnconfigure(0, weight=1)

    def _load(self):
        for w in self._scroll.winfo_children():
            w.destroy()

        snapshot: LedgerSnapshot = self._get_snapshot()
        statuses = self._svc.get_budget_status(snapshot.budgets, self._month)
        if not statuses:
            ctk.CTkLabel(
                self._scroll,
                text="No budgets set for this month. Click '+ Add Budget' to create one.",
                text_color="gray60",
            ).grid(row=0, column=0, pady=40)
            return

        for idx, status in enumerate(statuses):
            self._add_budget_card(idx, status)

    def _add_budget_card(self, idx: int, status: BudgetStatus):
        b = status.budget
        card = ctk.CTkFrame(self._scroll, fg_color=("gray90", "gray20"), corner_radius=8)
        card.grid(row=idx, column=0, sticky="ew", padx=4, pady=4)
        card.grid_columnconfigure(0, weight=1)

        hdr = ctk.CTkFrame(card, fg_color="transparent")
        hdr.grid(row=0, column=0, sticky="ew", padx=12, pady=(10, 4))
        hdr.grid_columnconfigure(0, weight=1)

        ctk.CTkLabel(
            hdr, text=b.category,
            font=ctk.CTkFont(size=13, weight="bold"), anchor="w",
        ).grid(row=0, column=0, sticky="w")

        color = status.level.color
        ctk.CTkLabel(hdr, text=f"{status.progress:.1f}%", text_color=color).grid(
            row=0, column=1, padx=(8, 0)
        )
        ctk.CTkButton(
            hdr, text="Delete", width=60, height=24,
            fg_color="transparent", border_width=1,
            text_color=("gray10", "gray90"),
            command=lambda: self._delete(status),
        ).grid(row=0, column=2, padx=(8, 0))

        ctk.CTkLabel(
            card,
            text=(
                f"Spent: {format_currency(status.spent)}  /  "
                f"Budget: {format_currency(b.amount)}  |  "
                f"Remaining: {format_currency(status.remaining)}"
            ),
            text_color="gray60", anchor="w",
        ).grid(row=1, column=0, padx=12, sticky="ew")

        bar = ctk.CTkProgressBar(card, progress_color=color)
        bar.grid(row=2, column=0, padx=12, pady=(4, 10), sticky="ew")
        bar.set(float(status.progress) / 100)

    def _open_add(self):
        form = BudgetForm(self.winfo_toplevel(), self._svc, month=self._month)
        self.wait_window(form)
        if form.saved:
            self._notify_refresh("budget")

    def _delete(self, status: BudgetStatus):
        b = self._svc.find(status.budget.id)
        if b is None:
            # Already gone from the store; drop the stale card.
            self._on_deleted(status.budget.id)
            return
        dlg = ConfirmDialog(
            self.winfo_toplevel(), "Delete Budget",
            f"Delete the {b.category} budget for {friendly_month(b.month)}?",
        )
        if dlg.result and self._svc.delete(b.id):
            self._on_deleted(b.id)
