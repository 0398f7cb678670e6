import dataclasses
import datetime
import math
from typing import Any, Dict

TIMESTAMP_FORMAT: str = '%d-%m-%Y %H:%M'


@dataclasses.dataclass(frozen=True)
class Transaction:
    """An immutable expense record.

    Transactions compare by value over all fields, which is what the model relies on when
    removing a transaction or looking up its row index.

    Attributes:
        amount (float): The expense amount.
        category (str): The expense category.
        timestamp (datetime.datetime): Creation time, defaults to now.

    Raises:
        ValueError: If the amount is not a positive finite number, or the category is blank.
    """
    amount: float
    category: str
    timestamp: datetime.datetime = dataclasses.field(default_factory=datetime.datetime.now)

    def __post_init__(self) -> None:
        if isinstance(self.amount, bool) or not isinstance(self.amount, (int, float)):
            raise ValueError(f'Transaction amount must be a number, got {self.amount!r}')
        if not math.isfinite(self.amount) or self.amount <= 0:
            raise ValueError(f'Transaction amount must be positive and finite, got {self.amount!r}')
        if not isinstance(self.category, str) or not self.category.strip():
            raise ValueError(f'Transaction category must be a non-empty string, got {self.category!r}')

    @property
    def formatted_timestamp(self) -> str:
        return self.timestamp.strftime(TIMESTAMP_FORMAT)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'amount': self.amount,
            'category': self.category,
            'timestamp': self.timestamp,
        }
