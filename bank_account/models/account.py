"""Account data model."""

import logging
import random
from dataclasses import dataclass, field
from decimal import Decimal
from threading import RLock

from bank_account.models.money import CENT, add_money, as_money, validate_amount
from bank_account.models.outcome import Outcome, OutcomeKind

logger = logging.getLogger(__name__)

ACCOUNT_NUMBER_MIN = 1_000_000_000
ACCOUNT_NUMBER_MAX = 9_999_999_999


def random_account_number(rng: random.Random | None = None) -> int:
    """
    Draw a ten-digit account number uniformly at random.

    Nothing remembers previous draws, so two calls can return the same number.

    Args:
        rng: Random source to draw from (default: the module-level generator)

    Returns:
        An integer in [1_000_000_000, 9_999_999_999]
    """
    source = rng if rng is not None else random
    return source.randint(ACCOUNT_NUMBER_MIN, ACCOUNT_NUMBER_MAX)


@dataclass
class Account:
    """Represents a bank account."""

    first_name: str = ""
    last_name: str = ""
    national_id: str = field(default="", repr=False)
    balance: Decimal = Decimal("0.00")
    account_number: int | None = None
    _lock: RLock = field(default_factory=RLock, init=False, repr=False, compare=False)

    def __post_init__(self):
        self.balance = as_money(self.balance)

    @property
    def holder(self) -> str:
        """Full name of the account holder."""
        return f"{self.first_name} {self.last_name}"

    def generate_account_number(self) -> int:
        """
        Draw a fresh random account number.

        The number is only returned; assign it to ``account_number`` to keep it.
        """
        return random_account_number()

    def deposit(self, amount, min_amount=CENT, max_amount=None) -> Outcome:
        """
        Deposit funds into the account.

        Args:
            amount: The amount to deposit (must be positive)
            min_amount: Smallest accepted amount
            max_amount: Largest accepted amount, or None for no cap

        Returns:
            A DEPOSITED Outcome reporting the amount and new balance

        Raises:
            InvalidAmountError: If the amount is invalid (negative, zero, or out of limits)
        """
        amt = validate_amount(amount, min_amount, max_amount)
        with self._lock:
            self.balance = add_money(self.balance, amt)
            balance = self.balance
        outcome = Outcome(
            kind=OutcomeKind.DEPOSITED,
            amount=amt,
            balance=balance,
            message=f"{self.holder} deposited ${amt}. Current Balance ${balance}",
        )
        logger.info(outcome.message)
        return outcome

    def withdraw(self, amount, min_amount=CENT, max_amount=None) -> Outcome:
        """
        Withdraw funds from the account.

        A withdrawal larger than the balance is refused and reported through
        the returned Outcome; the balance is left unchanged.

        Args:
            amount: The amount to withdraw (must be positive)
            min_amount: Smallest accepted amount
            max_amount: Largest accepted amount, or None for no cap

        Returns:
            A WITHDRAWN or INSUFFICIENT_FUNDS Outcome

        Raises:
            InvalidAmountError: If the amount is invalid (negative, zero, or out of limits)
        """
        amt = validate_amount(amount, min_amount, max_amount)
        with self._lock:
            if self.balance >= amt:
                self.balance = add_money(self.balance, -amt)
                kind = OutcomeKind.WITHDRAWN
            else:
                kind = OutcomeKind.INSUFFICIENT_FUNDS
            balance = self.balance

        if kind is OutcomeKind.WITHDRAWN:
            message = f"{self.holder} withdrew ${amt}. Current Balance ${balance}"
            logger.info(message)
        else:
            message = f"Unable to withdraw {amt} for {self.holder} due to insufficient funds."
            logger.warning(message)
        return Outcome(kind=kind, amount=amt, balance=balance, message=message)
