from dataclasses import dataclass, replace
from datetime import date
from decimal import Decimal
from models.transaction import Transaction
from services.data_service import DataService
from utils.currency import to_amount
from utils.date_helpers import long_date, today


@dataclass(frozen=True)
class TransactionDetail:
    category: str
    amount: Decimal
    date: str
    notes: str
    transaction_type: str


AMOUNT_MESSAGE = "Please enter a valid amount greater than zero."

NOT_FOUND_DETAIL = TransactionDetail("Not Found", Decimal("0"), "N/A", "N/A", "N/A")


class TransactionService:
    def __init__(self, data_service: DataService):
        self._data = data_service

    def create(
        self,
        category: str,
        amount: Decimal,
        date: date,
        is_income: bool = False,
        notes: str | None = None,
    ) -> Transaction | None:
        """Validate and store. None when the write was refused (offline)."""
        amount = self._validate(category, amount)
        tx = Transaction(
            category=category,
            amount=amount,
            date=date,
            is_income=is_income,
            notes=notes or None,
        )
        return tx if self._data.add_transaction(tx) else None

    def update(self, tx: Transaction) -> Transaction | None:
        tx = replace(tx, amount=self._validate(tx.category, tx.amount))
        return tx if self._data.update_transaction(tx) else None

    def delete(self, tx_id: str) -> bool:
        return self._data.delete_transaction(tx_id)

    def find(self, tx_id: str) -> Transaction | None:
        if not tx_id:
            return None
        return self._data.get_transaction(tx_id)

    def get_for_edit(self, tx_id: str) -> Transaction:
        """The stored transaction, or a blank expense dated today."""
        found = self.find(tx_id)
        if found:
            return found
        blank = Transaction(category="", amount=Decimal("0"), date=today())
        if tx_id:
            blank.id = tx_id
        return blank

    def get_detail(self, tx_id: str) -> TransactionDetail:
        tx = self.find(tx_id)
        if tx is None:
            return NOT_FOUND_DETAIL
        return TransactionDetail(
            category=tx.category,
            amount=tx.amount,
            date=long_date(tx.date),
            notes=tx.notes or "None",
            transaction_type=tx.type_label,
        )

    def _validate(self, category: str, amount: Decimal) -> Decimal:
        """Returns the amount rounded to cents."""
        if amount is None:
            raise ValueError(AMOUNT_MESSAGE)
        amount = to_amount(amount)
        if amount <= 0:
            raise ValueError(AMOUNT_MESSAGE)
        if not category or not category.strip():
            raise ValueError("Please select a category.")
        return amount
