"""
ExpenseTrackerMVC: the Model-View-Controller core of a desktop expense tracker.

This package provides:

- :mod:`ExpenseTrackerMVC.model` – Transactions, filter strategies and the observable :class:`ExpenseTrackerModel`.
- :mod:`ExpenseTrackerMVC.controller` – Input validation and the :class:`ExpenseTrackerController`.
- :mod:`ExpenseTrackerMVC.data` – pandas reporting helpers for views (totals and category summaries).
- :mod:`ExpenseTrackerMVC.settings` – tracker.json settings management and locale formatting.
- :mod:`ExpenseTrackerMVC.status` – Status codes and exceptions.
- :mod:`ExpenseTrackerMVC.log` – Logging setup and the in-memory log tank.
- :mod:`ExpenseTrackerMVC.ui` – Application-wide Qt signals and user notices.
"""
import sys

# Fail on Python < 3.11
if not (sys.version_info.major == 3 and sys.version_info.minor >= 11):
    raise RuntimeError('ExpenseTrackerMVC requires Python 3.11 or higher.')

__version__ = '0.1.0'
__license__ = 'GPL-3.0'
__description__ = 'ExpenseTrackerMVC: the model and controller core of a desktop expense tracker.'

from .log import log

log.setup_logging()
