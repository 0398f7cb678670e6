"""
Module for formatting decimal and currency values using Babel.

"""
import logging

from babel import Locale, numbers
from babel.core import UnknownLocaleError

DEFAULT_LOCALE: str = 'en_US'

CURRENCY_MAP: dict[str, str] = {
    'US': 'USD',
    'GB': 'GBP',
    'DE': 'EUR',
    'FR': 'EUR',
    'BE': 'EUR',
    'IT': 'EUR',
    'ES': 'EUR',
    'NL': 'EUR',
    'FI': 'EUR',
    'JP': 'JPY',
    'CA': 'CAD',
    'AU': 'AUD',
    'IN': 'INR',
    'BR': 'BRL',
    'CN': 'CNY',
    'KR': 'KRW',
    'DK': 'DKK',
    'SE': 'SEK',
    'NO': 'NOK',
    'HU': 'HUF',
    'MX': 'MXN',
    'ZA': 'ZAR',
}


def get_currency_from_locale(locale: str) -> str:
    """
    Retrieve the default currency code based on the locale's territory.

    Args:
        locale (str): Locale string, e.g. 'fr_FR'.

    Returns:
        str: Currency code such as 'EUR'. Defaults to 'USD' if the territory is unknown.
    """
    parts = locale.split('_')
    if len(parts) < 2:
        return 'USD'
    return CURRENCY_MAP.get(parts[1], 'USD')


def format_float(value: float, locale: str) -> str:
    """
    Format a float as a decimal string according to the locale conventions.

    Args:
        value (float): The numeric value to be formatted.
        locale (str): Locale string, e.g. 'en_US'.

    Returns:
        str: The formatted decimal string.
    """
    try:
        return numbers.format_decimal(value, locale=Locale.parse(locale))
    except (ValueError, TypeError, UnknownLocaleError) as ex:
        logging.debug(f'Error formatting decimal: {ex}')
        return str(value)


def format_currency_value(value: float, locale: str = None) -> str:
    """
    Format a float as a currency string based on the locale's default currency.

    Args:
        value (float): The numeric value to be formatted.
        locale (str, optional): Locale string, e.g. 'fr_FR'. Defaults to the configured locale.

    Returns:
        str: The formatted currency string.
    """
    if locale is None:
        from . import lib
        locale = lib.settings['locale'] or DEFAULT_LOCALE

    try:
        currency_code = get_currency_from_locale(locale)
        return numbers.format_currency(value, currency=currency_code, locale=Locale.parse(locale))
    except (ValueError, TypeError, UnknownLocaleError) as ex:
        logging.error(f'Error formatting currency: {ex}')
        return str(value)
