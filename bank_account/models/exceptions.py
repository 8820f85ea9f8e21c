"""Custom exceptions for the bank account package."""


class BankError(Exception):
    """Base exception for all banking-related errors."""
    pass


class InvalidAmountError(BankError):
    """Raised when an invalid amount is provided (e.g., negative amount)."""
    pass


class InsufficientFundsError(BankError):
    """Raised when a caller asks a failed withdrawal outcome to become an error."""
    pass


class AccountNumberExhaustedError(BankError):
    """Raised when an issuer cannot hand out another account number."""
    pass
