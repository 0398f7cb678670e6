"""
Model package: the Model of the MVC triad.

This package provides:

- :mod:`ExpenseTrackerMVC.model.transaction` – The immutable :class:`Transaction` value record.
- :mod:`ExpenseTrackerMVC.model.filter` – Filtering strategies (:class:`CategoryFilter`, :class:`AmountFilter`).
- :mod:`ExpenseTrackerMVC.model.listener` – The listener protocol implemented by views.
- :mod:`ExpenseTrackerMVC.model.model` – :class:`ExpenseTrackerModel`, the observable transaction store.
"""
