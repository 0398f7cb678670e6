"""The Model of the expense tracker.

:class:`ExpenseTrackerModel` owns the list of transactions and the indices of the
transactions matched by the most recently applied filter. It is observable: every state
change calls :meth:`ExpenseTrackerModelListener.update` on each registered listener,
synchronously and in registration order, passing the model itself.

Any change to the transactions clears the matched filter indices, as old indices may no
longer point at the same transactions.
"""
import logging
from typing import Iterable, List, Tuple

from .listener import ExpenseTrackerModelListener
from .transaction import Transaction
from ..status import status


class ExpenseTrackerModel:
    """Observable store of transactions and matched filter indices."""

    def __init__(self) -> None:
        self._transactions: List[Transaction] = []
        self._matched_filter_indices: List[int] = []
        self._listeners: List[ExpenseTrackerModelListener] = []

    def add_transaction(self, t: Transaction) -> None:
        """Append a transaction and notify listeners.

        Args:
            t (Transaction): The transaction to add.

        Raises:
            status.TransactionInvalidException: If ``t`` is None or not a Transaction.
        """
        if not isinstance(t, Transaction):
            raise status.TransactionInvalidException(f'Got {t!r}.')

        self._transactions.append(t)
        logging.debug(f'Transaction added: {t.amount} ({t.category})')

        # The previous filter result is stale
        self._matched_filter_indices.clear()
        self.state_changed()

    def remove_transaction(self, t: Transaction) -> None:
        """Remove the first transaction equal to ``t`` and notify listeners.

        Removing a transaction that is not in the model is not an error; the matched
        filter indices are cleared and listeners notified all the same.

        Args:
            t (Transaction): The transaction to remove.

        Raises:
            status.TransactionInvalidException: If ``t`` is None.
        """
        if t is None:
            raise status.TransactionInvalidException('Cannot remove None.')

        try:
            self._transactions.remove(t)
            logging.debug(f'Transaction removed: {t.amount} ({t.category})')
        except ValueError:
            logging.debug(f'Transaction not found, nothing removed: {t!r}')

        self._matched_filter_indices.clear()
        self.state_changed()

    def get_transactions(self) -> Tuple[Transaction, ...]:
        """Return a read-only snapshot of the transactions."""
        return tuple(self._transactions)

    def set_matched_filter_indices(self, indices: Iterable[int]) -> None:
        """Replace the matched filter indices and notify listeners.

        Args:
            indices (Iterable[int]): Row indices into the current transactions.

        Raises:
            status.FilterIndicesInvalidException: If ``indices`` is None, or any element is
                not an integer in ``[0, len(transactions))``. The model is left unchanged.
        """
        if indices is None:
            raise status.FilterIndicesInvalidException('Got None.')

        indices = list(indices)
        size = len(self._transactions)
        for index in indices:
            if isinstance(index, bool) or not isinstance(index, int):
                raise status.FilterIndicesInvalidException(f'Got non-integer index {index!r}.')
            if index < 0 or index > size - 1:
                raise status.FilterIndicesInvalidException(f'Got {index}, size is {size}.')

        self._matched_filter_indices = indices
        logging.debug(f'Matched filter indices set: {indices}')
        self.state_changed()

    def get_matched_filter_indices(self) -> List[int]:
        """Return a copy of the matched filter indices."""
        return list(self._matched_filter_indices)

    def register(self, listener: ExpenseTrackerModelListener) -> bool:
        """Register a listener for state change notifications.

        Args:
            listener (ExpenseTrackerModelListener): The listener to register.

        Returns:
            bool: True if the listener was added, False if it was None or already registered.
        """
        if listener is None or listener in self._listeners:
            return False

        self._listeners.append(listener)
        logging.debug(f'Listener registered, {len(self._listeners)} listener(s) in total')
        return True

    def number_of_listeners(self) -> int:
        return len(self._listeners)

    def contains_listener(self, listener: ExpenseTrackerModelListener) -> bool:
        return listener in self._listeners

    def state_changed(self) -> None:
        """Call ``update(self)`` on every listener, in registration order.

        Exceptions raised by a listener propagate to the caller.
        """
        for listener in self._listeners:
            listener.update(self)
