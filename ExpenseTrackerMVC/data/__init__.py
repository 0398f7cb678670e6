"""
ExpenseTrackerMVC data package: pandas-based reporting over the model's transactions.

This package provides:

- :mod:`ExpenseTrackerMVC.data.data` – Totals, per-category summaries and filter results as DataFrames.
"""
