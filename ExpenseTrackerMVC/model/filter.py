"""Filtering strategies for transactions.

The controller holds one :class:`TransactionFilter` at a time and applies it on demand. A
filter is pure: it returns the matching transactions in their original order and never
mutates its input.
"""
import abc
import logging
import math
from typing import List, Sequence

from .transaction import Transaction


class TransactionFilter(abc.ABC):
    """Base class of the filtering strategies."""

    def filter(self, transactions: Sequence[Transaction]) -> List[Transaction]:
        """Return the transactions matching this filter, preserving their order.

        Args:
            transactions (Sequence[Transaction]): The transactions to filter.

        Returns:
            list[Transaction]: A new list with the matching transactions.
        """
        filtered = [t for t in transactions if self.matches(t)]
        logging.debug(f'{self!r} matched {len(filtered)} of {len(transactions)} transactions')
        return filtered

    @abc.abstractmethod
    def matches(self, transaction: Transaction) -> bool:
        """Return True if the transaction satisfies the filter predicate."""


class CategoryFilter(TransactionFilter):
    """Matches transactions of a single category, case-insensitively."""

    def __init__(self, category: str) -> None:
        if not isinstance(category, str) or not category.strip():
            raise ValueError(f'Invalid category filter: {category!r}')
        self._category = category.strip()

    def __repr__(self) -> str:
        return f'CategoryFilter({self._category!r})'

    @property
    def category(self) -> str:
        return self._category

    def matches(self, transaction: Transaction) -> bool:
        return transaction.category.strip().lower() == self._category.lower()


class AmountFilter(TransactionFilter):
    """Matches transactions whose amount lies within an inclusive range."""

    def __init__(self, minimum: float, maximum: float) -> None:
        for v in (minimum, maximum):
            if isinstance(v, bool) or not isinstance(v, (int, float)) or not math.isfinite(v):
                raise ValueError(f'Invalid amount filter bound: {v!r}')
        if minimum > maximum:
            raise ValueError(f'Amount filter minimum ({minimum}) is greater than maximum ({maximum})')

        self._minimum = float(minimum)
        self._maximum = float(maximum)

    def __repr__(self) -> str:
        return f'AmountFilter({self._minimum}, {self._maximum})'

    @property
    def minimum(self) -> float:
        return self._minimum

    @property
    def maximum(self) -> float:
        return self._maximum

    def matches(self, transaction: Transaction) -> bool:
        return self._minimum <= transaction.amount <= self._maximum
