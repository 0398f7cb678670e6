"""The Controller of the expense tracker.

:class:`ExpenseTrackerController` handles user input and updates the
:class:`ExpenseTrackerModel`. It does not update the view: the view is registered as a
model listener on construction and redraws itself whenever the model changes.

Filtering uses a swappable :class:`TransactionFilter` strategy set with
:meth:`ExpenseTrackerController.set_filter`.
"""
import logging
from typing import Any, Callable, Optional

from ..model.filter import TransactionFilter
from ..model.listener import ExpenseTrackerModelListener
from ..model.model import ExpenseTrackerModel
from ..model.transaction import Transaction
from ..status import status
from .validation import InputValidation

VALIDATION_SECTIONS = ('categories', 'amount')


class ExpenseTrackerController:
    """Handles user actions and delegates them to the model.

    Args:
        model (ExpenseTrackerModel): The model to update.
        view (ExpenseTrackerModelListener): The view, registered as a model listener.
        validator (InputValidation, optional): Defaults to a validator built from settings.
        notifier (Callable[[Any, str], None], optional): Shows user-visible notices. Defaults
            to :func:`ExpenseTrackerMVC.ui.actions.show_notice`.
    """

    def __init__(
            self,
            model: ExpenseTrackerModel,
            view: ExpenseTrackerModelListener,
            validator: Optional[InputValidation] = None,
            notifier: Optional[Callable[[Any, str], None]] = None,
    ) -> None:
        self.model = model
        self.view = view

        self.validator = validator
        if validator is None:
            self.validator = InputValidation.from_settings()
            self._connect_signals()

        if notifier is None:
            from ..ui.actions import show_notice
            notifier = show_notice
        self.notifier = notifier

        self._filter: Optional[TransactionFilter] = None

        self.model.register(self.view)

    def _connect_signals(self) -> None:
        from ..ui.actions import signals
        signals.configSectionChanged.connect(self.on_config_section_changed)

    def on_config_section_changed(self, section: str) -> None:
        """Rebuild the settings-driven validator when its configuration changes."""
        if section not in VALIDATION_SECTIONS:
            return
        logging.debug(f'Config section "{section}" changed, reloading input validation')
        self.validator = InputValidation.from_settings()

    @property
    def filter(self) -> Optional[TransactionFilter]:
        return self._filter

    def set_filter(self, transaction_filter: Optional[TransactionFilter]) -> None:
        self._filter = transaction_filter

    def add_transaction(self, amount: float, category: str) -> bool:
        """Validate the input and add a new transaction to the model.

        Args:
            amount (float): The expense amount.
            category (str): The expense category.

        Returns:
            bool: True if the transaction was added, False if the input was rejected.
        """
        if not self.validator.is_valid_amount(amount):
            logging.debug(f'Rejected transaction, invalid amount: {amount!r}')
            return False
        if not self.validator.is_valid_category(category):
            logging.debug(f'Rejected transaction, invalid category: {category!r}')
            return False

        category = self.validator.canonical_category(category)
        self.model.add_transaction(Transaction(amount, category))
        return True

    def apply_filter(self) -> None:
        """Apply the current filter and store the matching row indices in the model.

        Without a filter, a notice is shown and the model is left untouched.
        """
        if self._filter is None:
            self.notifier(self.view, status.get_message(status.Status.FilterNotSet))
            return

        transactions = self.model.get_transactions()
        filtered = self._filter.filter(transactions)

        row_indexes = []
        for t in filtered:
            try:
                row_indexes.append(transactions.index(t))
            except ValueError:
                continue

        self.model.set_matched_filter_indices(row_indexes)

    def undo_transaction(self, row_index: int) -> bool:
        """Remove the transaction at the given row.

        Args:
            row_index (int): Row index into the model's transactions.

        Returns:
            bool: True if the transaction was removed, False if the row index is out of range.
        """
        transactions = self.model.get_transactions()
        if isinstance(row_index, bool) or not isinstance(row_index, int):
            logging.debug(f'Undo disallowed, invalid row index: {row_index!r}')
            return False
        if not 0 <= row_index < len(transactions):
            logging.debug(f'Undo disallowed, row index {row_index} out of range')
            return False

        self.model.remove_transaction(transactions[row_index])
        return True
