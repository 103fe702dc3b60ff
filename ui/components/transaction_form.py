import customtkinter as ctk
from models.transaction import Transaction
from services.transaction_service import TransactionService
from ui.components.confirm_dialog import center_over_master
from ui.components.date_picker import DatePickerWidget
from utils.constants import TRANSACTION_CATEGORIES
from utils.currency import to_decimal
from utils.date_helpers import today
from utils.logging_setup import get_logger

logger = get_logger("finance_tracker.ui.transaction_form")


class TransactionForm(ctk.CTkToplevel):
    """Add a transaction, or edit one when `transaction` is given."""

    def __init__(
        self,
        master,
        tx_service: TransactionService,
        transaction: Transaction | None = None,
        date_format: str = "MM/DD/YYYY",
        **kwargs,
    ):
        super().__init__(master, **kwargs)
        self._svc = tx_service
        self._transaction = transaction
        self.saved: Transaction | None = None

        self.title("Edit Transaction" if transaction else "Add Transaction")
        self.resizable(False, False)
        self.grid_columnconfigure(1, weight=1)

        tx = transaction
        r = 0

        self._label("Type:", r)
        self._type_var = ctk.StringVar(
            value="income" if tx and tx.is_income else "expense"
        )
        type_frame = ctk.CTkFrame(self, fg_color="transparent")
        type_frame.grid(row=r, column=1, padx=(0, 16), pady=(16, 4), sticky="w")
        for value in ("expense", "income"):
            ctk.CTkRadioButton(
                type_frame, text=value.title(),
                variable=self._type_var, value=value,
            ).pack(side="left", padx=4)
        r += 1

        self._label("Category:", r)
        current_cat = tx.category if tx and tx.category else TRANSACTION_CATEGORIES[0]
        self._cat_var = ctk.StringVar(value=current_cat)
        ctk.CTkComboBox(
            self, values=TRANSACTION_CATEGORIES,
            variable=self._cat_var, width=200, state="readonly",
        ).grid(row=r, column=1, padx=(0, 16), pady=4, sticky="ew")
        r += 1

        self._label("Amount:", r)
        self._amount_var = ctk.StringVar(
            value=f"{tx.amount:f}" if tx and tx.amount else ""
        )
        ctk.CTkEntry(self, textvariable=self._amount_var, width=200).grid(
            row=r, column=1, padx=(0, 16), pady=4, sticky="ew"
        )
        r += 1

        self._label("Date:", r)
        self._date_picker = DatePickerWidget(
            self, initial_date=tx.date if tx else today(), date_format=date_format,
        )
        self._date_picker.grid(row=r, column=1, padx=(0, 16), pady=4, sticky="w")
        r += 1

        self._label("Notes:", r)
        self._notes_var = ctk.StringVar(value=(tx.notes or "") if tx else "")
        ctk.CTkEntry(self, textvariable=self._notes_var, width=200).grid(
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

    def _label(self, text, row):
        ctk.CTkLabel(self, text=text).grid(
            row=row, column=0, padx=(16, 8), pady=4, sticky="e"
        )

    def _on_save(self):
        self._error_var.set("")
        try:
            amount = to_decimal(self._amount_var.get())
        except ValueError:
            self._error_var.set("Please enter a valid amount greater than zero.")
            return
        tx_date = self._date_picker.get()
        if tx_date is None:
            self._error_var.set("Invalid date.")
            return

        category = self._cat_var.get()
        is_income = self._type_var.get() == "income"
        notes = self._notes_var.get().strip() or None
        try:
            if self._transaction:
                edited = Transaction(
                    id=self._transaction.id,
                    category=category,
                    amount=amount,
                    date=tx_date,
                    is_income=is_income,
                    notes=notes,
                )
                result = self._svc.update(edited)
            else:
                result = self._svc.create(category, amount, tx_date, is_income, notes)
        except ValueError as e:
            self._error_var.set(str(e))
            return
        except Exception:
            logger.exception("Saving transaction failed")
            self._error_var.set("An error occurred while saving.")
            return

        if result is None:
            # Refused while offline; the window already shows the notice.
            self._error_var.set("No internet connection available.")
            return
        self.saved = result
        self.destroy()
