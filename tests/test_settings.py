"""Tests for configuration management."""
from decimal import Decimal

import pytest
from config.settings import Settings

ENV_VARS = (
    'BANK_CURRENCY_SYMBOL',
    'BANK_MIN_AMOUNT',
    'BANK_MAX_AMOUNT',
    'BANK_ISSUE_ATTEMPTS',
    'BANK_LOG_LEVEL',
    'BANK_LOG_FILE',
)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove all bank settings from the environment."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_settings_defaults():
    """Test that all default values are correctly set."""
    settings = Settings()

    assert settings.currency_symbol == '$'
    assert settings.min_amount == Decimal('0.01')
    assert settings.max_amount == Decimal('1000000000000')
    assert settings.issue_attempts == 100
    assert settings.log_level == 'INFO'
    assert settings.log_file == 'bank.log'


def test_settings_load_defaults(clean_env):
    """Loading with nothing set gives the defaults."""
    assert Settings.load() == Settings()


def test_settings_load(clean_env):
    """Test loading Settings from environment variables."""
    clean_env.setenv('BANK_CURRENCY_SYMBOL', '£')
    clean_env.setenv('BANK_MIN_AMOUNT', '1')
    clean_env.setenv('BANK_MAX_AMOUNT', '500.50')
    clean_env.setenv('BANK_ISSUE_ATTEMPTS', '7')
    clean_env.setenv('BANK_LOG_LEVEL', 'debug')
    clean_env.setenv('BANK_LOG_FILE', '/tmp/other.log')

    settings = Settings.load()

    assert settings.currency_symbol == '£'
    assert settings.min_amount == Decimal('1')
    assert settings.max_amount == Decimal('500.50')
    assert settings.issue_attempts == 7
    assert settings.log_level == 'DEBUG'
    assert settings.log_file == '/tmp/other.log'


def test_settings_load_bad_amount(clean_env):
    """Test that loading fails when an amount is not a number."""
    clean_env.setenv('BANK_MAX_AMOUNT', 'lots')

    with pytest.raises(ValueError, match="BANK_MAX_AMOUNT environment variable must be a number"):
        Settings.load()


def test_settings_load_bad_attempts(clean_env):
    """Test that loading fails when the attempt count is not an integer."""
    clean_env.setenv('BANK_ISSUE_ATTEMPTS', '2.5')

    with pytest.raises(ValueError, match="BANK_ISSUE_ATTEMPTS environment variable must be an integer"):
        Settings.load()


@pytest.mark.parametrize("value", ['NaN', 'Infinity', '-5'])
def test_settings_load_rejects_non_finite_or_negative_amount(clean_env, value):
    """Amount limits must be finite and non-negative."""
    clean_env.setenv('BANK_MAX_AMOUNT', value)

    with pytest.raises(ValueError, match="BANK_MAX_AMOUNT environment variable must be a non-negative number"):
        Settings.load()


def test_settings_load_rejects_unknown_log_level(clean_env):
    """Test that loading fails when the log level is not a logging level name."""
    clean_env.setenv('BANK_LOG_LEVEL', 'loud')

    with pytest.raises(ValueError, match="BANK_LOG_LEVEL environment variable must be one of"):
        Settings.load()
