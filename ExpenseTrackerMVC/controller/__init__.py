"""
Controller package: user input handling for the MVC triad.

This package provides:

- :mod:`ExpenseTrackerMVC.controller.validation` – Settings-driven amount and category validation.
- :mod:`ExpenseTrackerMVC.controller.controller` – :class:`ExpenseTrackerController`.
"""
