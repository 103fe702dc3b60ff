from datetime import date
from decimal import Decimal
from typing import Optional
from database.db_manager import DatabaseManager
from models.transaction import Transaction
from utils.currency import to_decimal
from utils.date_helpers import format_date, format_month, parse_date


class TransactionDAO:
    def __init__(self, db: DatabaseManager):
        self._db = db

    def _row_to_model(self, row) -> Transaction:
        return Transaction(
            id=row["id"],
            category=row["category"],
            amount=to_decimal(row["amount"]),
            date=parse_date(row["date"]),
            is_income=bool(row["is_income"]),
            notes=row["notes"],
        )

    def _params(self, tx: Transaction) -> tuple:
        return (
            tx.category,
            str(tx.amount),
            format_date(tx.date),
            int(tx.is_income),
            tx.notes,
        )

    def get_all(self) -> list[Transaction]:
        conn = self._db.get_connection()
        rows = conn.execute(
            "SELECT * FROM transactions ORDER BY date ASC, rowid ASC"
        ).fetchall()
        return [self._row_to_model(r) for r in rows]

    def get_by_id(self, tx_id: str) -> Optional[Transaction]:
        conn = self._db.get_connection()
        row = conn.execute(
            "SELECT * FROM transactions WHERE id = ?", (tx_id,)
        ).fetchone()
        return self._row_to_model(row) if row else None

    def insert(self, tx: Transaction) -> Transaction:
        conn = self._db.get_connection()
        conn.execute(
            """INSERT INTO transactions(category, amount, date, is_income, notes, id)
               VALUES (?, ?, ?, ?, ?, ?)""",
            self._params(tx) + (tx.id,),
        )
        conn.commit()
        return tx

    def update(self, tx: Transaction) -> int:
        """Returns the number of rows touched (0 when the id is unknown)."""
        conn = self._db.get_connection()
        cur = conn.execute(
            """UPDATE transactions
               SET category = ?, amount = ?, date = ?, is_income = ?, notes = ?
               WHERE id = ?""",
            self._params(tx) + (tx.id,),
        )
        conn.commit()
        return cur.rowcount

    def delete(self, tx_id: str) -> int:
        conn = self._db.get_connection()
        cur = conn.execute("DELETE FROM transactions WHERE id = ?", (tx_id,))
        conn.commit()
        return cur.rowcount

    def get_by_category_and_month(self, category: str, month: date) -> list[Transaction]:
        """Expense rows for an exact category within month's (year, month)."""
        conn = self._db.get_connection()
        rows = conn.execute(
            """SELECT * FROM transactions
               WHERE category = ?
                 AND is_income = 0
                 AND substr(date, 1, 7) = ?
               ORDER BY date ASC, rowid ASC""",
            (category, format_month(month)),
        ).fetchall()
        return [self._row_to_model(r) for r in rows]

    def get_spending_for_category(self, category: str, month: date) -> Decimal:
        # Summed in Python: amounts are stored as TEXT decimals.
        return sum(
            (t.amount for t in self.get_by_category_and_month(category, month)),
            Decimal("0"),
        )
