"""Reporting API over the model's transactions.

Views call these helpers from their ``update`` callback to render totals and summaries.
"""
import logging
from typing import Sequence

import pandas as pd

from ..model.model import ExpenseTrackerModel
from ..model.transaction import Transaction

TRANSACTION_DATA_COLUMNS = ['amount', 'category', 'timestamp']
SUMMARY_DATA_COLUMNS = ['category', 'total', 'transactions']


def get_data(transactions: Sequence[Transaction]) -> pd.DataFrame:
    """Convert transactions to a DataFrame, one row per transaction in the given order.

    Args:
        transactions (Sequence[Transaction]): The transactions to convert.

    Returns:
        pd.DataFrame: Columns ``amount``, ``category`` and ``timestamp``.
    """
    if not transactions:
        return pd.DataFrame(columns=TRANSACTION_DATA_COLUMNS)

    df = pd.DataFrame([t.to_dict() for t in transactions], columns=TRANSACTION_DATA_COLUMNS)
    df['amount'] = df['amount'].astype(float)
    df['timestamp'] = pd.to_datetime(df['timestamp'])
    return df


def get_total(transactions: Sequence[Transaction]) -> float:
    """Return the sum of the transaction amounts, 0.0 when there are none."""
    if not transactions:
        return 0.0
    return float(get_data(transactions)['amount'].sum())


def get_summary(transactions: Sequence[Transaction]) -> pd.DataFrame:
    """Summarize the transactions per category.

    Args:
        transactions (Sequence[Transaction]): The transactions to summarize.

    Returns:
        pd.DataFrame: Columns ``category``, ``total`` and ``transactions`` (the count), sorted
        by descending total. Categories are grouped case-insensitively and labelled with the
        first spelling seen.
    """
    df = get_data(transactions)
    if df.empty:
        return pd.DataFrame(columns=SUMMARY_DATA_COLUMNS)

    df['key'] = df['category'].str.strip().str.lower()
    summary = (
        df.groupby('key', sort=False)
        .agg(
            category=('category', 'first'),
            total=('amount', 'sum'),
            transactions=('amount', 'count'),
        )
        .sort_values('total', ascending=False, kind='stable')
        .reset_index(drop=True)
    )
    logging.debug(f'Summarized {len(df)} transactions into {len(summary)} categories')
    return summary[SUMMARY_DATA_COLUMNS]


def get_matched(model: ExpenseTrackerModel) -> pd.DataFrame:
    """Return the rows of the model's current filter result.

    The DataFrame index holds the row indices into the model's transactions.
    """
    df = get_data(model.get_transactions())
    return df.iloc[model.get_matched_filter_indices()]
