import customtkinter as ctk
from services.transaction_service import TransactionDetail
from ui.components.confirm_dialog import center_over_master
from utils.currency import format_currency


class TransactionDetailDialog(ctk.CTkToplevel):
    """Read-only view of one transaction."""

    def __init__(self, master, detail: TransactionDetail, **kwargs):
        super().__init__(master, **kwargs)
        self.title("Transaction Details")
        self.resizable(False, False)
        self.grid_columnconfigure(1, weight=1)

        rows = [
            ("Category:", detail.category),
            ("Amount:", format_currency(detail.amount)),
            ("Date:", detail.date),
            ("Type:", detail.transaction_type),
            ("Notes:", detail.notes),
        ]
        for r, (label, value) in enumerate(rows):
            ctk.CTkLabel(self, text=label, text_color="gray60").grid(
                row=r, column=0, padx=(16, 8), pady=(16 if r == 0 else 4, 4), sticky="e"
            )
            ctk.CTkLabel(self, text=value, anchor="w", wraplength=260).grid(
                row=r, column=1, padx=(0, 16), pady=(16 if r == 0 else 4, 4), sticky="w"
            )

        ctk.CTkButton(self, text="Back", width=90, command=self.destroy).grid(
            row=len(rows), column=0, columnspan=2, padx=16, pady=(8, 16), sticky="e"
        )

        self.transient(master)
        self.grab_set()
        center_over_master(self)
