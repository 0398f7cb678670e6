"""
Logging subsystem: handlers and setup helpers for application logging.

Modules:

- :mod:`ExpenseTrackerMVC.log.log` – Log handler integrating with Python logging and the Qt message handler.
"""
