"""Input validation for user-entered amounts and categories.

The allowed categories and the amount bounds come from the ``categories`` and ``amount``
sections of tracker.json, see :mod:`ExpenseTrackerMVC.settings.lib`.
"""
import math
from typing import Any, Iterable


class InputValidation:
    """Validates amounts and categories against a configured policy.

    Args:
        categories (Iterable[str]): The allowed categories. Matching is case-insensitive.
        minimum (float): Exclusive lower bound of a valid amount.
        maximum (float): Inclusive upper bound of a valid amount.
    """

    def __init__(self, categories: Iterable[str], minimum: float = 0.0, maximum: float = 1000.0) -> None:
        # Lower-cased key -> configured spelling
        self._spellings = {c.strip().lower(): c.strip() for c in categories}
        self.categories = frozenset(self._spellings)
        self.minimum = float(minimum)
        self.maximum = float(maximum)

    @classmethod
    def from_settings(cls, settings=None) -> 'InputValidation':
        """Build a validator from the settings API.

        Args:
            settings (SettingsAPI, optional): Defaults to the application settings.
        """
        if settings is None:
            from ..settings import lib
            settings = lib.settings

        amount = settings.get_section('amount')
        return cls(
            settings.get_section('categories'),
            minimum=amount['minimum'],
            maximum=amount['maximum'],
        )

    def is_valid_amount(self, amount: Any) -> bool:
        if isinstance(amount, bool) or not isinstance(amount, (int, float)):
            return False
        if not math.isfinite(amount):
            return False
        return self.minimum < amount <= self.maximum

    def is_valid_category(self, category: Any) -> bool:
        if not isinstance(category, str) or not category.strip():
            return False
        return category.strip().lower() in self.categories

    def canonical_category(self, category: str) -> str:
        """Return the configured spelling of a valid category.

        Raises:
            ValueError: If the category is not valid.
        """
        if not self.is_valid_category(category):
            raise ValueError(f'Invalid category: {category!r}')
        return self._spellings[category.strip().lower()]
