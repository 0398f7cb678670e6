# tests/test_model.py
"""
Unit tests for ExpenseTrackerMVC.model.model.ExpenseTrackerModel
(covers transaction mutation, matched filter indices, and listener notification).

Run:
    python -m unittest tests.test_model
"""
import unittest

from ExpenseTrackerMVC.model.model import ExpenseTrackerModel
from ExpenseTrackerMVC.model.transaction import Transaction
from ExpenseTrackerMVC.status import status
from ExpenseTrackerMVC.ui.actions import signals
from tests.base import BaseTestCase, RecordingListener, mute_ui_signals


class ExpenseTrackerModelTests(BaseTestCase):

    def setUp(self) -> None:
        super().setUp()
        self.model = ExpenseTrackerModel()
        self.listener = RecordingListener()
        self.model.register(self.listener)

    def test_starts_empty(self):
        model = ExpenseTrackerModel()
        self.assertEqual(model.get_transactions(), ())
        self.assertEqual(model.get_matched_filter_indices(), [])
        self.assertEqual(model.number_of_listeners(), 0)

    def test_add_transaction_appends_and_notifies_once(self):
        t = Transaction(50.0, 'food')
        self.model.add_transaction(t)

        self.assertEqual(self.model.get_transactions(), (t,))
        self.assertEqual(self.listener.update_count, 1)

    def test_add_transaction_clears_matched_indices(self):
        self.model.add_transaction(Transaction(50.0, 'food'))
        self.model.set_matched_filter_indices([0])
        self.assertEqual(self.model.get_matched_filter_indices(), [0])

        self.model.add_transaction(Transaction(20.0, 'transport'))
        self.assertEqual(self.model.get_matched_filter_indices(), [])

    def test_add_none_raises_and_does_not_notify(self):
        with mute_ui_signals():
            with self.assertRaises(status.TransactionInvalidException):
                self.model.add_transaction(None)
        self.assertEqual(self.model.get_transactions(), ())
        self.assertEqual(self.listener.update_count, 0)

    def test_invalid_transaction_is_a_value_error(self):
        with mute_ui_signals():
            with self.assertRaises(ValueError):
                self.model.add_transaction('not a transaction')

    def test_invalid_transaction_emits_error_signal(self):
        messages = []

        def _slot(message: str) -> None:
            messages.append(message)

        signals.error.connect(_slot)
        try:
            with self.assertRaises(status.TransactionInvalidException):
                self.model.add_transaction(None)
        finally:
            signals.error.disconnect(_slot)
        self.assertEqual(len(messages), 1)

    def test_remove_transaction(self):
        food = Transaction(50.0, 'food')
        transport = Transaction(20.0, 'transport')
        self.model.add_transaction(food)
        self.model.add_transaction(transport)
        self.model.set_matched_filter_indices([1])

        self.model.remove_transaction(food)

        self.assertEqual(self.model.get_transactions(), (transport,))
        self.assertEqual(self.model.get_matched_filter_indices(), [])
        self.assertEqual(self.listener.update_count, 4)

    def test_remove_missing_transaction_is_a_noop_that_notifies(self):
        t = Transaction(50.0, 'food')
        self.model.add_transaction(t)

        self.model.remove_transaction(Transaction(99.0, 'bills'))

        self.assertEqual(self.model.get_transactions(), (t,))
        self.assertEqual(self.listener.update_count, 2)

    def test_remove_only_first_equal_transaction(self):
        t = Transaction(10.0, 'food')
        self.model.add_transaction(t)
        self.model.add_transaction(t)

        self.model.remove_transaction(t)

        self.assertEqual(self.model.get_transactions(), (t,))

    def test_remove_none_raises(self):
        with mute_ui_signals():
            with self.assertRaises(status.TransactionInvalidException):
                self.model.remove_transaction(None)
        self.assertEqual(self.listener.update_count, 0)

    def test_get_transactions_is_a_snapshot(self):
        self.model.add_transaction(Transaction(50.0, 'food'))
        snapshot = self.model.get_transactions()

        self.assertIsInstance(snapshot, tuple)
        self.model.add_transaction(Transaction(20.0, 'transport'))
        self.assertEqual(len(snapshot), 1)

    def test_set_matched_filter_indices_notifies(self):
        self.model.add_transaction(Transaction(50.0, 'food'))
        self.model.add_transaction(Transaction(20.0, 'transport'))

        self.model.set_matched_filter_indices([1, 0])

        self.assertEqual(self.model.get_matched_filter_indices(), [1, 0])
        self.assertEqual(self.listener.update_count, 3)

    def test_set_matched_filter_indices_copies_input(self):
        self.model.add_transaction(Transaction(50.0, 'food'))
        indices = [0]
        self.model.set_matched_filter_indices(indices)

        indices.append(5)
        self.assertEqual(self.model.get_matched_filter_indices(), [0])

        returned = self.model.get_matched_filter_indices()
        returned.clear()
        self.assertEqual(self.model.get_matched_filter_indices(), [0])

    def test_set_matched_filter_indices_empty(self):
        self.model.set_matched_filter_indices([])
        self.assertEqual(self.model.get_matched_filter_indices(), [])
        self.assertEqual(self.listener.update_count, 1)

    def test_set_matched_filter_indices_rejects_invalid(self):
        self.model.add_transaction(Transaction(50.0, 'food'))
        self.model.add_transaction(Transaction(20.0, 'transport'))
        self.model.set_matched_filter_indices([0])
        updates = self.listener.update_count

        for indices in (None, [-1], [2], [0, 2], [0.0], [True], ['0']):
            with self.subTest(indices=indices):
                with mute_ui_signals():
                    with self.assertRaises(status.FilterIndicesInvalidException):
                        self.model.set_matched_filter_indices(indices)
                self.assertEqual(self.model.get_matched_filter_indices(), [0])
                self.assertEqual(self.listener.update_count, updates)

    def test_set_matched_filter_indices_on_empty_model(self):
        with mute_ui_signals():
            with self.assertRaises(ValueError):
                self.model.set_matched_filter_indices([0])

    def test_register_is_idempotent(self):
        self.assertEqual(self.model.number_of_listeners(), 1)
        self.assertFalse(self.model.register(self.listener))
        self.assertEqual(self.model.number_of_listeners(), 1)

    def test_register_rejects_none(self):
        self.assertFalse(self.model.register(None))
        self.assertEqual(self.model.number_of_listeners(), 1)

    def test_contains_listener(self):
        other = RecordingListener('other')
        self.assertTrue(self.model.contains_listener(self.listener))
        self.assertFalse(self.model.contains_listener(other))

        self.assertTrue(self.model.register(other))
        self.assertTrue(self.model.contains_listener(other))
        self.assertEqual(self.model.number_of_listeners(), 2)

    def test_listeners_notified_in_registration_order(self):
        calls = []
        model = ExpenseTrackerModel()
        for name in ('first', 'second', 'third'):
            model.register(RecordingListener(name, calls))

        model.add_transaction(Transaction(50.0, 'food'))

        self.assertEqual(calls, ['first', 'second', 'third'])

    def test_listener_sees_new_state(self):
        t = Transaction(50.0, 'food')
        self.model.add_transaction(t)
        self.model.set_matched_filter_indices([0])

        self.assertEqual(self.listener.snapshots[0], ((t,), []))
        self.assertEqual(self.listener.snapshots[1], ((t,), [0]))

    def test_listener_exception_propagates_and_skips_later_listeners(self):
        class FailingListener:
            def update(self, model):
                raise RuntimeError('boom')

        model = ExpenseTrackerModel()
        later = RecordingListener('later')
        model.register(FailingListener())
        model.register(later)

        with self.assertRaises(RuntimeError):
            model.add_transaction(Transaction(50.0, 'food'))
        self.assertEqual(len(model.get_transactions()), 1)
        self.assertEqual(later.update_count, 0)

    def test_add_then_remove_round_trip(self):
        existing = Transaction(5.0, 'other')
        t = Transaction(50.0, 'food')
        self.model.add_transaction(existing)
        self.model.add_transaction(t)
        size = len(self.model.get_transactions())

        self.model.remove_transaction(t)

        self.assertNotIn(t, self.model.get_transactions())
        self.assertEqual(len(self.model.get_transactions()), size - 1)


if __name__ == '__main__':
    unittest.main()
