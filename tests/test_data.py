# tests/test_data.py
"""
Unit tests for ExpenseTrackerMVC.data.data.

Run:
    python -m unittest tests.test_data
"""
import datetime
import unittest

import pandas as pd

from ExpenseTrackerMVC.data import data
from ExpenseTrackerMVC.model.model import ExpenseTrackerModel
from ExpenseTrackerMVC.model.transaction import Transaction
from tests.base import BaseTestCase

STAMP = datetime.datetime(2024, 3, 1, 9, 30)


class DataTests(BaseTestCase):

    def setUp(self) -> None:
        super().setUp()
        self.transactions = (
            Transaction(50.0, 'food', STAMP),
            Transaction(20.0, 'transport', STAMP),
            Transaction(30.0, 'food', STAMP),
            Transaction(5, 'other', STAMP),
        )

    def test_get_data(self):
        df = data.get_data(self.transactions)
        self.assertEqual(list(df.columns), data.TRANSACTION_DATA_COLUMNS)
        self.assertEqual(df['amount'].tolist(), [50.0, 20.0, 30.0, 5.0])
        self.assertEqual(df['category'].tolist(), ['food', 'transport', 'food', 'other'])
        self.assertTrue(pd.api.types.is_datetime64_any_dtype(df['timestamp']))

    def test_get_data_empty(self):
        df = data.get_data(())
        self.assertTrue(df.empty)
        self.assertEqual(list(df.columns), data.TRANSACTION_DATA_COLUMNS)

    def test_get_total(self):
        self.assertEqual(data.get_total(self.transactions), 105.0)
        self.assertEqual(data.get_total([]), 0.0)

    def test_get_summary(self):
        summary = data.get_summary(self.transactions)
        self.assertEqual(list(summary.columns), data.SUMMARY_DATA_COLUMNS)
        self.assertEqual(summary['category'].tolist(), ['food', 'transport', 'other'])
        self.assertEqual(summary['total'].tolist(), [80.0, 20.0, 5.0])
        self.assertEqual(summary['transactions'].tolist(), [2, 1, 1])

    def test_get_summary_groups_mixed_case_categories(self):
        transactions = [
            Transaction(10.0, 'Food', STAMP),
            Transaction(5.0, 'food', STAMP),
            Transaction(7.0, ' FOOD ', STAMP),
            Transaction(20.0, 'bills', STAMP),
        ]
        summary = data.get_summary(transactions)
        self.assertEqual(summary['category'].tolist(), ['Food', 'bills'])
        self.assertEqual(summary['total'].tolist(), [22.0, 20.0])
        self.assertEqual(summary['transactions'].tolist(), [3, 1])

    def test_get_summary_empty(self):
        summary = data.get_summary([])
        self.assertTrue(summary.empty)
        self.assertEqual(list(summary.columns), data.SUMMARY_DATA_COLUMNS)

    def test_get_matched(self):
        model = ExpenseTrackerModel()
        for t in self.transactions:
            model.add_transaction(t)
        model.set_matched_filter_indices([0, 2])

        matched = data.get_matched(model)
        self.assertEqual(matched.index.tolist(), [0, 2])
        self.assertEqual(matched['amount'].tolist(), [50.0, 30.0])

    def test_get_matched_without_filter(self):
        model = ExpenseTrackerModel()
        model.add_transaction(self.transactions[0])
        self.assertTrue(data.get_matched(model).empty)


if __name__ == '__main__':
    unittest.main()
