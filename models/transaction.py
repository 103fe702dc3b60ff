from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Optional
import uuid


def new_id() -> str:
    return uuid.uuid4().hex


@dataclass
class Transaction:
    category: str
    amount: Decimal
    date: date
    is_income: bool = False
    notes: Optional[str] = None
    id: str = field(default_factory=new_id)

    @property
    def type_label(self) -> str:
        return "Income" if self.is_income else "Expense"
