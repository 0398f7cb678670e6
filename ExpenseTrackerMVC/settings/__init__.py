"""
Settings package: configuration API and localization helpers.

This package provides:

- :mod:`ExpenseTrackerMVC.settings.lib` – Core settings management and schema validation for tracker.json.
- :mod:`ExpenseTrackerMVC.settings.locale` – Localization utilities for formatting amounts.
"""
