"""Data models for the bank account package."""

from .account import Account, random_account_number
from .outcome import Outcome, OutcomeKind
from .exceptions import (
    BankError,
    InvalidAmountError,
    InsufficientFundsError,
    AccountNumberExhaustedError,
)

__all__ = [
    "Account",
    "random_account_number",
    "Outcome",
    "OutcomeKind",
    "BankError",
    "InvalidAmountError",
    "InsufficientFundsError",
    "AccountNumberExhaustedError",
]
