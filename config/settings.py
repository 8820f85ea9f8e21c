"""Configuration management for bank-account."""
import os
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


@dataclass
class Settings:
    """Configuration settings for bank-account.

    This class centralizes the business rules and logging options used by
    the service layer and the teller console runner.
    """

    # Presentation
    currency_symbol: str = '$'

    # Business Rules
    min_amount: Decimal = Decimal('0.01')
    max_amount: Decimal = Decimal('1000000000000')  # 1T

    # Account number issuance
    issue_attempts: int = 100

    # Logging Configuration
    log_level: str = 'INFO'
    log_file: str = 'bank.log'

    @classmethod
    def load(cls) -> 'Settings':
        """Load settings from environment variables.

        Unset variables fall back to the defaults above.

        Returns:
            Settings: A Settings instance with values from environment variables.

        Raises:
            ValueError: If a numeric environment variable cannot be parsed, an
                amount is negative or not finite, or the log level is unknown.
        """
        defaults = cls()
        return cls(
            currency_symbol=os.getenv('BANK_CURRENCY_SYMBOL', defaults.currency_symbol),
            min_amount=_decimal_env('BANK_MIN_AMOUNT', defaults.min_amount),
            max_amount=_decimal_env('BANK_MAX_AMOUNT', defaults.max_amount),
            issue_attempts=_int_env('BANK_ISSUE_ATTEMPTS', defaults.issue_attempts),
            log_level=_level_env('BANK_LOG_LEVEL', defaults.log_level),
            log_file=os.getenv('BANK_LOG_FILE', defaults.log_file),
        )


def _decimal_env(name: str, default: Decimal) -> Decimal:
    value = os.getenv(name)
    if not value:
        return default
    try:
        amount = Decimal(value)
    except InvalidOperation:
        raise ValueError(f"{name} environment variable must be a number, got {value!r}")
    if not amount.is_finite() or amount < 0:
        raise ValueError(f"{name} environment variable must be a non-negative number, got {value!r}")
    return amount


def _int_env(name: str, default: int) -> int:
    value = os.getenv(name)
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} environment variable must be an integer, got {value!r}")


def _level_env(name: str, default: str) -> str:
    level = os.getenv(name, default).upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"{name} environment variable must be one of {', '.join(LOG_LEVELS)}, got {level!r}")
    return level
