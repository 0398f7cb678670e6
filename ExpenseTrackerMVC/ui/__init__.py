"""
UI package: application-wide signals and user-facing notices.

This package provides:

- :mod:`ExpenseTrackerMVC.ui.actions` – Application-wide Qt signals and the notice slot used by the controller.
"""
