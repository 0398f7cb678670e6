"""Settings library for the tracker configuration.

Provides:
    - Schema validation and enforcement for tracker.json structure.
    - Loading, saving, reverting, and managing application settings.
    - Constants describing the configuration schema.
"""

import json
import logging
import math
import pathlib
import shutil
from typing import Dict, Any, Optional, List

from PySide6 import QtCore, QtWidgets

from ..status import status

app_name: str = 'ExpenseTrackerMVC'

METADATA_KEYS: List[str] = [
    'name',
    'locale',
]

AMOUNT_KEYS: List[str] = [
    'minimum',
    'maximum',
]

CONFIG_SCHEMA: Dict[str, Any] = {
    'metadata': {
        'type': dict,
        'required': True,
        'required_keys': METADATA_KEYS,
        'item_schema': {
            'name': {'type': str, 'required': True},
            'locale': {'type': str, 'required': True},
        }
    },
    'categories': {
        'type': list,
        'required': True,
        'value_type': str,
    },
    'amount': {
        'type': dict,
        'required': True,
        'required_keys': AMOUNT_KEYS,
        'value_type': (int, float),
    },
}


def _validate_metadata(metadata_dict: Dict[str, Any], specs: Dict[str, Any]) -> None:
    """Validate the 'metadata' section of the tracker configuration.

    Args:
        metadata_dict: Mapping of metadata keys to values.
        specs: Schema dict containing 'required_keys' and 'item_schema'.

    Raises:
        ValueError: If a required key is missing.
        TypeError: If a value is not of the expected type.
    """
    logging.debug('Validating "metadata" section.')
    missing = [k for k in specs['required_keys'] if k not in metadata_dict]
    if missing:
        msg: str = f'metadata is missing keys {missing}.'
        logging.error(msg)
        raise ValueError(msg)
    for key, key_specs in specs['item_schema'].items():
        if not isinstance(metadata_dict[key], key_specs['type']):
            msg = f'Metadata "{key}" must be {key_specs["type"]}, got {type(metadata_dict[key])}.'
            logging.error(msg)
            raise TypeError(msg)


def _validate_categories(categories_list: List[Any], specs: Dict[str, Any]) -> None:
    """Validate the 'categories' section of the tracker configuration.

    Ensures categories_list is a non-empty list of unique, non-blank category names.

    Args:
        categories_list: The allowed transaction categories.
        specs: Schema dict containing 'value_type'.

    Raises:
        TypeError: If a category is not a string.
        ValueError: If the list is empty, or a category is blank or duplicated.
    """
    logging.debug('Validating "categories" section.')
    if not categories_list:
        msg: str = 'categories must not be empty.'
        logging.error(msg)
        raise ValueError(msg)

    seen = set()
    for category in categories_list:
        if not isinstance(category, specs['value_type']):
            msg = f'Category "{category}" must be a string.'
            logging.error(msg)
            raise TypeError(msg)
        name = category.strip().lower()
        if not name:
            msg = 'Category names must not be blank.'
            logging.error(msg)
            raise ValueError(msg)
        if name in seen:
            msg = f'Category "{category}" is defined more than once.'
            logging.error(msg)
            raise ValueError(msg)
        seen.add(name)


def _validate_amount(amount_dict: Dict[str, Any], specs: Dict[str, Any]) -> None:
    """Validate the 'amount' section of the tracker configuration.

    Args:
        amount_dict: Mapping with the exclusive 'minimum' and inclusive 'maximum' amount bounds.
        specs: Schema dict containing 'required_keys' and 'value_type'.

    Raises:
        ValueError: If keys are missing, bounds are not finite, or minimum is not below maximum.
        TypeError: If a bound is not a number.
    """
    logging.debug('Validating "amount" section.')
    required_keys = set(specs['required_keys'])
    if set(amount_dict.keys()) != required_keys:
        msg: str = f'amount must have keys {required_keys}, got {set(amount_dict.keys())}.'
        logging.error(msg)
        raise ValueError(msg)

    for key in specs['required_keys']:
        v = amount_dict[key]
        if isinstance(v, bool) or not isinstance(v, specs['value_type']):
            msg = f'Amount "{key}" must be a number, got {type(v)}.'
            logging.error(msg)
            raise TypeError(msg)
        if not math.isfinite(v):
            msg = f'Amount "{key}" must be finite, got {v}.'
            logging.error(msg)
            raise ValueError(msg)

    if amount_dict['minimum'] >= amount_dict['maximum']:
        msg = (
            f'Amount minimum ({amount_dict["minimum"]}) must be '
            f'less than maximum ({amount_dict["maximum"]}).'
        )
        logging.error(msg)
        raise ValueError(msg)


class ConfigPaths:
    """Manage application file paths and ensure the default template and directories exist."""

    def __init__(self) -> None:
        # Set the application name and organization
        QtWidgets.QApplication.setApplicationName(app_name)
        QtWidgets.QApplication.setOrganizationName('')
        logging.debug(f'Setting application name: {app_name}')

        # Get the app data directory
        p = QtCore.QStandardPaths.writableLocation(QtCore.QStandardPaths.AppDataLocation)
        app_data_dir = pathlib.Path(p)
        logging.debug(f'Using app data directory: {app_data_dir}')

        self.template_dir: pathlib.Path = pathlib.Path(__file__).parent.parent / 'config'
        self.config_template: pathlib.Path = self.template_dir / 'tracker.json.template'

        self.config_dir: pathlib.Path = app_data_dir / 'config'
        self.config_path: pathlib.Path = self.config_dir / 'tracker.json'

        self._verify_and_prepare()

    def _verify_and_prepare(self) -> None:
        """Verify the template exists, create the config directory and seed the config file.

        Raises:
            FileNotFoundError: If the tracker.json template is missing.
        """
        logging.debug(f'Verifying config template: {self.config_template}')
        if not self.config_template.exists():
            msg = f'Missing tracker config template: {self.config_template}'
            logging.error(msg)
            raise FileNotFoundError(msg)

        if not self.config_dir.exists():
            logging.debug(f'Creating config directory: {self.config_dir}')
            self.config_dir.mkdir(parents=True, exist_ok=True)

        # Ensure a valid config exists even if the user hasn't set one up yet
        if not self.config_path.exists():
            logging.debug(f'Copying default config from template to {self.config_path}')
            shutil.copy(self.config_template, self.config_path)


class SettingsAPI(ConfigPaths):
    """
    Provides an interface to get/set/revert/save tracker.json sections.
    """

    def __init__(self, config_path: Optional[str] = None) -> None:
        """Initialize SettingsAPI and load the config data.

        Args:
            config_path: Optional path to a custom tracker.json file.
        """
        super().__init__()

        self.config_path: pathlib.Path = pathlib.Path(config_path) if config_path else self.config_path

        self._signals_blocked: bool = False

        self.config_data: Dict[str, Any] = {}
        for k, specs in CONFIG_SCHEMA.items():
            self.config_data[k] = specs['type']()

        self.init_data()

    def __getitem__(self, key: str) -> Any:
        """Retrieve a metadata value using dictionary-style access.

        Args:
            key: Metadata key to retrieve.

        Returns:
            Value stored for the metadata key, or None if it has the wrong type.

        Raises:
            KeyError: If key is not in METADATA_KEYS.
        """
        if key not in METADATA_KEYS:
            raise KeyError(f'Invalid metadata key: {key}, must be one of {METADATA_KEYS}')

        _type = CONFIG_SCHEMA['metadata']['item_schema'][key]['type']
        v = self.config_data['metadata'].get(key)
        if not isinstance(v, _type):
            logging.error(f'Metadata key "{key}" is not of type {_type}, got {type(v)}.')
            return None
        return v

    def block_signals(self, v: bool) -> None:
        """Enable or disable emission of configuration change signals.

        Args:
            v: True to block signals, False to unblock.
        """
        self._signals_blocked = v

    def init_data(self) -> None:
        """Reload the config data, emitting UI update signals."""
        self.load_config()

        if self._signals_blocked:
            return

        from ..ui.actions import signals
        for section in self.config_data:
            signals.configSectionChanged.emit(section)

    def load_config(self) -> Dict[str, Any]:
        """Load tracker.json from disk and validate it against the schema.

        Returns:
            The loaded config data dictionary.

        Raises:
            status.ConfigNotFoundException: If the config file is missing.
            status.ConfigInvalidException: If JSON parsing or validation fails.
        """
        logging.debug(f'Loading config from "{self.config_path}"')
        if not self.config_path.exists():
            raise status.ConfigNotFoundException(f'{self.config_path}')

        try:
            with self.config_path.open('r', encoding='utf-8') as f:
                data: Dict[str, Any] = json.load(f)
            self.validate_config(data)
        except (ValueError, TypeError) as ex:
            raise status.ConfigInvalidException(f'{ex}') from ex

        self.config_data = data
        return self.config_data

    def validate_config(self, data: Dict[str, Any] = None) -> None:
        """Validate config data against the defined CONFIG_SCHEMA.

        Args:
            data (dict, optional): Config data to validate. Defaults to self.config_data.

        Raises:
            TypeError: If a section or value has the wrong type.
            ValueError: If a required section is missing or a value is invalid.
        """
        if data is None:
            data = self.config_data
        if not isinstance(data, dict):
            raise TypeError(f'Config data must be a dict, got {type(data)}.')

        logging.debug('Validating config data against schema.')
        for field, specs in CONFIG_SCHEMA.items():
            if specs.get('required') and field not in data:
                msg: str = f'Missing required field: {field}'
                logging.error(msg)
                raise ValueError(msg)

            if not isinstance(data[field], specs['type']):
                msg = f'Field "{field}" must be {specs["type"]}, got {type(data[field])}.'
                logging.error(msg)
                raise TypeError(msg)

            if field == 'metadata':
                _validate_metadata(data[field], specs)
            elif field == 'categories':
                _validate_categories(data[field], specs)
            elif field == 'amount':
                _validate_amount(data[field], specs)

        logging.debug('Config data is valid.')

    def get_section(self, section_name: str) -> Any:
        """Retrieve a copy of a configuration section.

        Args:
            section_name: Section name, a key of CONFIG_SCHEMA.

        Returns:
            A copy of the requested section data.

        Raises:
            KeyError: If section_name is not in config_data.
        """
        return self.config_data[section_name].copy()

    def set_section(self, section_name: str, new_data: Any) -> None:
        """Replace, validate and persist a configuration section.

        Args:
            section_name: Section to update.
            new_data: New data for the section.

        Raises:
            ValueError: If section_name is unrecognized or new_data is invalid.
            TypeError: If new_data has the wrong type.
        """
        if section_name not in CONFIG_SCHEMA:
            msg: str = f'Unknown section_name: "{section_name}"'
            logging.error(msg)
            raise ValueError(msg)

        candidate: Dict[str, Any] = dict(self.config_data)
        candidate[section_name] = new_data
        self.validate_config(candidate)

        logging.debug(f'Setting config section "{section_name}".')
        self.config_data = candidate
        self.save_section(section_name)

        if self._signals_blocked:
            return

        from ..ui.actions import signals
        signals.configSectionChanged.emit(section_name)

    def save_section(self, section_name: str) -> None:
        """Persist a single configuration section to tracker.json.

        Args:
            section_name: The section to save.

        Raises:
            ValueError: If section_name is not recognized.
        """
        if section_name not in self.config_data:
            msg: str = f'Unknown section_name for save: "{section_name}"'
            logging.error(msg)
            raise ValueError(msg)

        original_data: Dict[str, Any] = {}
        if self.config_path.exists():
            with self.config_path.open('r', encoding='utf-8') as f:
                original_data = json.load(f)

        new_data: Dict[str, Any] = original_data.copy()
        new_data[section_name] = self.config_data[section_name]

        logging.debug(f'Saving section "{section_name}" to "{self.config_path}"')
        with self.config_path.open('w', encoding='utf-8') as f:
            json.dump(new_data, f, indent=4, ensure_ascii=False)

    def revert_to_template(self) -> None:
        """Restore tracker.json from the default template file and reload it.

        Raises:
            FileNotFoundError: If the template file is missing.
        """
        logging.debug(f'Reverting config to template: {self.config_template}')
        if not self.config_template.exists():
            msg: str = f'Config template not found: {self.config_template}'
            logging.error(msg)
            raise FileNotFoundError(msg)
        shutil.copy(self.config_template, self.config_path)
        self.init_data()


settings: SettingsAPI = SettingsAPI()
