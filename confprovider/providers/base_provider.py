"""
Typed configuration facade.

ConfigurationProviderBase knows nothing about where settings live. It holds
the business rules instead: which settings are required, which are optional
and what they default to, and how each raw string is validated and
normalised. Descendants supply raw values through two hooks.

Every failure raises ConfigurationSettingError with a message that states:
    - the setting involved
    - the exact problem (missing, empty, white space, or malformed)
    - for malformed values, the value as configured and what is accepted
"""

from abc import ABC, abstractmethod
from datetime import date, datetime
from enum import Enum
from typing import Callable, Optional

from confprovider.providers.connection import ConnectionInfo
from confprovider.utils.exceptions import ConfigurationSettingError
from confprovider.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_FISCAL_YEAR_START = date(1, 10, 1)
DEFAULT_NOTIFY_ON_UPLOAD = True
DB_CONNECTION_NAME = 'MyDb'

# Every spelling accepted for dates; anything else is rejected on every Python version
DATE_FORMATS = (
    '%Y-%m-%d',
    '%Y-%m-%dT%H:%M',
    '%Y-%m-%dT%H:%M:%S',
    '%Y-%m-%d %H:%M',
    '%Y-%m-%d %H:%M:%S',
    '%m/%d/%Y',
    '%d %B %Y',
    '%d %b %Y',
    '%B %d, %Y',
    '%b %d, %Y',
)


class SettingState(Enum):
    """Presence of a raw setting value."""
    MISSING = 'missing'
    EMPTY = 'empty'
    BLANK = 'blank'
    PRESENT = 'present'


def classify_setting(value: Optional[str]) -> SettingState:
    if value is None:
        return SettingState.MISSING
    if len(value) == 0:
        return SettingState.EMPTY
    if value.isspace():
        return SettingState.BLANK
    return SettingState.PRESENT


def parse_date(value: str) -> Optional[date]:
    """Parse a date in any accepted spelling, or return None."""
    text = value.strip()
    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    return None


def parse_bool(value: str) -> Optional[bool]:
    """Parse "True"/"False" in any letter case, or return None."""
    text = value.strip().lower()
    if text == 'true':
        return True
    if text == 'false':
        return False
    return None


class ConfigurationProviderBase(ABC):
    """
    Strongly typed, validated access to application settings.

    Required settings raise when they are missing, empty or white space.
    Optional settings fall back to a default when absent and raise only
    when a value is present but malformed.
    """

    section = 'AppSettings'

    @property
    def email_templates_path(self) -> str:
        """
        Folder holding e-mail templates, relative to the application root.

        Required. Always starts with a backslash, which is prefixed when the
        configured value lacks one.
        """
        value = self.get_required_setting_value('EmailTemplatesPath')
        return value if value.startswith('\\') else '\\' + value

    @property
    def payment_gateway_service_url(self) -> str:
        """
        Base URL of the credit card payment gateway.

        Required. A trailing "/" is appended when the configured URL lacks one.
        """
        value = self.get_required_setting_value('PaymentGatewayServiceUrl')
        return value if value.endswith('/') else value + '/'

    @property
    def fiscal_year_start(self) -> date:
        """
        Start of the fiscal year. Only month and day are meaningful.

        Optional, defaults to 1 October. A value that is not a date raises.
        """
        value = self.get_setting_value('FiscalYearStart')
        if classify_setting(value) is not SettingState.PRESENT:
            logger.debug("FiscalYearStart not configured, using default", extra={
                'setting': 'FiscalYearStart', 'default': DEFAULT_FISCAL_YEAR_START.isoformat()})
            return DEFAULT_FISCAL_YEAR_START

        parsed = parse_date(value)
        if parsed is None:
            raise self._invalid_setting(
                'FiscalYearStart', value,
                f"The FiscalYearStart configuration setting value of: {value}, is not a valid date. "
                f"This property is expected to be a valid parseable date, "
                f"for example 2000-10-01, 10/01/2000 or 1 October 2000"
            )
        return parsed

    @property
    def notify_on_upload(self) -> bool:
        """
        Whether to send notifications on successful uploads of videos and other assets.

        Optional, defaults to True. A value that is not a boolean raises.
        """
        value = self.get_setting_value('NotifyOnUpload')
        if classify_setting(value) is not SettingState.PRESENT:
            logger.debug("NotifyOnUpload not configured, using default", extra={
                'setting': 'NotifyOnUpload', 'default': DEFAULT_NOTIFY_ON_UPLOAD})
            return DEFAULT_NOTIFY_ON_UPLOAD

        parsed = parse_bool(value)
        if parsed is None:
            raise self._invalid_setting(
                'NotifyOnUpload', value,
                f"The NotifyOnUpload configuration setting value of: {value}, is not a valid Boolean. "
                f"This property is expected to be parseable to a Boolean value. "
                f'Possible values are "True" or "False"'
            )
        return parsed

    @property
    def db_connection_information(self) -> ConnectionInfo:
        """
        Connection information for the application database.

        Required. Descendants raise a ConfigurationSettingError naming
        exactly what is missing and where.
        """
        return self.get_db_connection_information_core(DB_CONNECTION_NAME)

    def get_required_setting_value(self, key: str) -> str:
        """Return the raw value of a required setting, raising if it is not present."""
        value = self.get_setting_value(key)
        ensure_setting_is_present(value, lambda state: self._missing_setting(key, state))
        return value

    def _missing_setting(self, key: str, state: SettingState) -> ConfigurationSettingError:
        if state is SettingState.MISSING:
            message = (f"Either the {self.section} Key: {key}, is Missing or the value is Missing "
                       f"in the configuration store. This setting is a Required setting")
        elif state is SettingState.BLANK:
            message = (f"The value of the {self.section} Key: {key} in the configuration store "
                       f"is White Spaces. This setting is a Required setting")
        else:
            message = (f"The value of the {self.section} Key: {key} in the configuration store "
                       f"is Empty. This setting is a Required setting")
        logger.warning(message, extra={'setting': key, 'state': state.value})
        return ConfigurationSettingError(message)

    def _invalid_setting(self, key: str, value: str, message: str) -> ConfigurationSettingError:
        logger.warning(message, extra={'setting': key, 'value': value})
        return ConfigurationSettingError(message)

    @abstractmethod
    def get_setting_value(self, key: str) -> Optional[str]:
        """Return the raw value of a setting, or None when it is absent."""

    @abstractmethod
    def get_db_connection_information_core(self, connection_name: str) -> ConnectionInfo:
        """Look up connection information by its logical name."""


def ensure_setting_is_present(
    value: Optional[str],
    error_factory: Callable[[SettingState], Exception],
) -> None:
    """Raise the exception built by error_factory unless value is present."""
    state = classify_setting(value)
    if state is not SettingState.PRESENT:
        raise error_factory(state)
