from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .model import ExpenseTrackerModel


@runtime_checkable
class ExpenseTrackerModelListener(Protocol):
    """Observer of :class:`ExpenseTrackerModel` state changes.

    Views implement :meth:`update` and re-read the model's transactions and matched filter
    indices whenever it is called.
    """

    def update(self, model: 'ExpenseTrackerModel') -> None:
        ...
