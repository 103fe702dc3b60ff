from typing import Optional
from database.db_manager import DatabaseManager
from models.budget import Budget
from utils.currency import to_decimal
from utils.date_helpers import format_date, parse_date


class BudgetDAO:
    def __init__(self, db: DatabaseManager):
        self._db = db

    def _row_to_model(self, row) -> Budget:
        return Budget(
            id=row["id"],
            category=row["category"],
            amount=to_decimal(row["amount"]),
            month=parse_date(row["month"]),
        )

    def get_all(self) -> list[Budget]:
        """Insertion order, which the reports rely on for category order."""
        conn = self._db.get_connection()
        rows = conn.execute("SELECT * FROM budgets ORDER BY rowid ASC").fetchall()
        return [self._row_to_model(r) for r in rows]

    def get_by_id(self, budget_id: str) -> Optional[Budget]:
        conn = self._db.get_connection()
        row = conn.execute(
            "SELECT * FROM budgets WHERE id = ?", (budget_id,)
        ).fetchone()
        return self._row_to_model(row) if row else None

    def insert(self, budget: Budget) -> Budget:
        conn = self._db.get_connection()
        conn.execute(
            "INSERT INTO budgets(id, category, amount, month) VALUES (?, ?, ?, ?)",
            (budget.id, budget.category, str(budget.amount), format_date(budget.month)),
        )
        conn.commit()
        return budget

    def delete(self, budget_id: str) -> int:
        conn = self._db.get_connection()
        cur = conn.execute("DELETE FROM budgets WHERE id = ?", (budget_id,))
        conn.commit()
        return cur.rowcount
