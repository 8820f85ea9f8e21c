"""Bank service for opening accounts and moving money."""

import logging

from tabulate import tabulate

from bank_account.models.account import Account
from bank_account.models.money import format_money
from bank_account.models.outcome import Outcome
from bank_account.services.account_numbers import RandomAccountNumberIssuer
from config.settings import Settings

logger = logging.getLogger(__name__)


class BankService:
    """Service layer for banking operations."""

    def __init__(self, settings: Settings | None = None, issuer=None):
        """
        Initialize the BankService.

        Args:
            settings: Business rules and presentation options (default: Settings())
            issuer: Object with an issue() method returning account numbers
                (default: a RandomAccountNumberIssuer)
        """
        self._settings = settings if settings is not None else Settings()
        self._issuer = issuer if issuer is not None else RandomAccountNumberIssuer(
            max_attempts=self._settings.issue_attempts
        )

    def open_account(self, first_name: str, last_name: str, national_id: str, balance=0) -> Account:
        """
        Open a new account with an issued account number.

        Args:
            first_name: The account holder's first name
            last_name: The account holder's last name
            national_id: The holder's national identifier
            balance: Opening balance (default: 0)

        Returns:
            The created Account

        Raises:
            InvalidAmountError: If the opening balance is not a number
            AccountNumberExhaustedError: If the issuer cannot hand out a number
        """
        account = Account(first_name, last_name, national_id, balance)
        account.account_number = self._issuer.issue()
        logger.info("Opened account %s for %s", account.account_number, account.holder)
        return account

    def deposit(self, account: Account, amount) -> Outcome:
        """Deposit into an account within the configured amount limits."""
        return account.deposit(amount, self._settings.min_amount, self._settings.max_amount)

    def withdraw(self, account: Account, amount) -> Outcome:
        """Withdraw from an account within the configured amount limits."""
        return account.withdraw(amount, self._settings.min_amount, self._settings.max_amount)

    def summarize(self, accounts) -> str:
        """
        Render accounts as a plain-text table.

        Args:
            accounts: Iterable of Account objects

        Returns:
            The table with Account, Holder and Balance columns
        """
        header = ['Account', 'Holder', 'Balance']
        rows = [
            [
                account.account_number if account.account_number is not None else '-',
                account.holder,
                format_money(account.balance, self._settings.currency_symbol),
            ]
            for account in accounts
        ]
        return tabulate([header] + rows, headers="firstrow", stralign='right', numalign='right')
