"""Outcome data model."""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from bank_account.models.exceptions import InsufficientFundsError


class OutcomeKind(str, Enum):
    """What a deposit or withdraw call did."""

    DEPOSITED = "DEPOSITED"
    WITHDRAWN = "WITHDRAWN"
    INSUFFICIENT_FUNDS = "INSUFFICIENT_FUNDS"


@dataclass(frozen=True)
class Outcome:
    """Result of a balance operation, ready to be rendered by the caller."""

    kind: OutcomeKind
    amount: Decimal
    balance: Decimal
    message: str

    @property
    def succeeded(self) -> bool:
        """True unless the withdrawal was refused for insufficient funds."""
        return self.kind is not OutcomeKind.INSUFFICIENT_FUNDS

    def raise_for_status(self) -> "Outcome":
        """
        Turn a refused withdrawal into an exception.

        Returns:
            The outcome itself when it succeeded

        Raises:
            InsufficientFundsError: If the withdrawal was refused
        """
        if not self.succeeded:
            raise InsufficientFundsError(self.message)
        return self

    def __str__(self) -> str:
        return self.message
