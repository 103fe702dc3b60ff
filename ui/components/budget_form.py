import customtkinter as ctk
from datetime import date
from services.budget_service import BudgetService
from ui.components.confirm_dialog import center_over_master
from utils.constants import BUDGET_CATEGORIES
from utils.currency import to_decimal
from utils.date_helpers import friendly_month
from utils.logging_setup import get_logger

logger = get_logger("finance_tracker.ui.budget_form")


class BudgetForm(ctk.CTkToplevel):
    """Allocate an amount to a category for one month."""

    def __init__(self, master, budget_service: BudgetService, month: date, **kwargs):
        super().__init__(master, **kwargs)
        self._svc = budget_service
        self._month = month
        self.saved = False

        self.title("New Budget")
        self.resizable(False, False)
        self.grid_columnconfigure(1, weight=1)

        r = 0
        ctk.CTkLabel(self, text="Category:").grid(
            row=r, column=0, padx=(16, 8), pady=(16, 4), sticky="e"
        )
        self._cat_var = ctk.StringVar(value=BUDGET_CATEGORIES[0])
        ctk.CTkComboBox(
            self, values=BUDGET_CATEGORIES, variable=self._cat_var,
            width=200, state="readonly",
        ).grid(row=r, column=1, padx=(0, 16), pady=(16, 4), sticky="ew")
        r += 1

        ctk.CTkLabel(self, text="Month:").grid(
            row=r, column=0, padx=(16, 8), pady=4, sticky="e"
        )
        ctk.CTkLabel(self, text=friendly_month(month), anchor="w").grid(
            row=r, column=1, padx=(0, 16), pady=4, sticky="ew"
        )
        r += 1

        ctk.CTkLabel(self, text="Amount ($):").grid(
            row=r, column=0, padx=(16, 8), pady=4, sticky="e"
        )
        self._amount_var = ctk.StringVar()
        ctk.CTkEntry(self, textvariable=self._amount_var, width=200).grid(
            row=r, column=1, padx=(0, 16), pady=4, sticky="ew"
        )
        r += 1

        self._error_var = ctk.StringVar()
        ctk.CTkLabel(
            self, textvariable=self._error_var,
            text_color="#F44336", wraplength=280, anchor="w",
        ).grid(row=r, column=0, columnspan=2, padx=16, pady=(0, 4), sticky="ew")
        r += 1

        buttons = ctk.CTkFrame(self, fg_color="transparent")
        buttons.grid(row=r, column=0, columnspan=2, padx=16, pady=(4, 16), sticky="ew")
        ctk.CTkButton(
            buttons, text="Cancel", width=90,
            fg_color="transparent", border_width=1,
            text_color=("gray10", "gray90"),
            command=self.destroy,
        ).pack(side="left")
        ctk.CTkButton(buttons, text="Save", width=90, command=self._on_save).pack(side="right")

        self.transient(master)
        self.grab_set()
        center_over_master(self)

    def _on_save(self):
        try:
            amount = to_decimal(self._amount_var.get())
            budget = self._svc.create(self._cat_var.get(), amount, self._month)
        except ValueError:
            self._error_var.set("Please enter a valid amount and category.")
            return
        except Exception:
            logger.exception("Saving budget failed")
            self._error_var.set("An error occurred while saving.")
            return
        if budget is None:
            self._error_var.set("No internet connection available.")
            return
        self.saved = True
        self.destroy()
