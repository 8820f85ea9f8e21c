"""Account number issuers."""

import logging
import random
from threading import Lock

from bank_account.models.account import (
    ACCOUNT_NUMBER_MAX,
    ACCOUNT_NUMBER_MIN,
    random_account_number,
)
from bank_account.models.exceptions import AccountNumberExhaustedError

logger = logging.getLogger(__name__)


class RandomAccountNumberIssuer:
    """Issues random account numbers, never the same one twice."""

    def __init__(self, rng: random.Random | None = None, max_attempts: int = 100):
        """
        Initialize the issuer.

        Args:
            rng: Random source (default: a fresh unseeded random.Random)
            max_attempts: Draws allowed per issue() before giving up
        """
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self._rng = rng if rng is not None else random.Random()
        self._max_attempts = max_attempts
        self._issued: set[int] = set()
        self._lock = Lock()

    def issue(self) -> int:
        """
        Draw an account number that has not been issued yet.

        Returns:
            The new account number

        Raises:
            AccountNumberExhaustedError: If every draw collided with an issued number
        """
        with self._lock:
            for _ in range(self._max_attempts):
                number = random_account_number(self._rng)
                if number not in self._issued:
                    self._issued.add(number)
                    return number
                logger.debug("Account number %d already issued, redrawing", number)
        raise AccountNumberExhaustedError(
            f"No unused account number after {self._max_attempts} attempts"
        )

    def release(self, number: int) -> None:
        """Forget an issued number so it may be drawn again."""
        with self._lock:
            self._issued.discard(number)

    def __contains__(self, number: int) -> bool:
        return number in self._issued

    def __len__(self) -> int:
        return len(self._issued)


class SequentialAccountNumberIssuer:
    """Issues account numbers from a monotonic counter."""

    def __init__(self, start: int = ACCOUNT_NUMBER_MIN):
        if not ACCOUNT_NUMBER_MIN <= start <= ACCOUNT_NUMBER_MAX:
            raise ValueError(
                f"start must be between {ACCOUNT_NUMBER_MIN} and {ACCOUNT_NUMBER_MAX}"
            )
        self._next = start
        self._lock = Lock()

    def issue(self) -> int:
        with self._lock:
            if self._next > ACCOUNT_NUMBER_MAX:
                raise AccountNumberExhaustedError("Account number range exhausted")
            number = self._next
            self._next += 1
        return number
