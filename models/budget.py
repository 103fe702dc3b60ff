from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from models.transaction import new_id


@dataclass
class Budget:
    category: str
    amount: Decimal     # allocated
    month: date         # always the 1st of the month
    id: str = field(default_factory=new_id)

    def __post_init__(self):
        if self.month.day != 1:
            self.month = self.month.replace(day=1)
