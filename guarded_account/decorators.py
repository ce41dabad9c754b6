"""
Account Decorator Module

Wraps any AccountInterface to add policy checks in front of the wrapped
account without modifying it. Decorators hold no account state of their
own, so they can be stacked in any order.
"""

from decimal import Decimal
from typing import Optional

from .accounts import AccountInterface
from .config import get_config
from .errors import LimitExceeded
from .events import ObserverLike
from .logging_config import get_logger
from .money import Numeric, format_amount, to_amount


logger = get_logger("guarded_account.decorators")


class AccountDecorator(AccountInterface):
    """Delegates every operation to the wrapped account"""

    def __init__(self, account: AccountInterface):
        if not isinstance(account, AccountInterface):
            raise TypeError(f"Expected an AccountInterface, got {type(account).__name__}")
        self._account = account

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._account!r})"

    @property
    def wrapped(self) -> AccountInterface:
        return self._account

    @property
    def account_number(self) -> str:
        return self._account.account_number

    @property
    def is_active(self) -> bool:
        return self._account.is_active

    def deposit(self, amount: Numeric) -> None:
        self._account.deposit(amount)

    def withdraw(self, amount: Numeric) -> None:
        self._account.withdraw(amount)

    def get_balance(self) -> Decimal:
        return self._account.get_balance()

    def close(self) -> None:
        self._account.close()

    def add_observer(self, observer: ObserverLike) -> None:
        self._account.add_observer(observer)


class WithdrawalLimitDecorator(AccountDecorator):
    """Rejects any single withdrawal above a fixed ceiling"""

    def __init__(self, account: AccountInterface, limit: Optional[Numeric] = None):
        super().__init__(account)
        if limit is None:
            limit = get_config().withdrawal_limit
        self.limit = to_amount(limit)
        if self.limit < 0:
            raise ValueError(f"Withdrawal limit cannot be negative: {format_amount(self.limit)}")

    def withdraw(self, amount: Numeric) -> None:
        """
        Raises:
            LimitExceeded: If amount is above the limit, whatever the balance
        """
        amount = to_amount(amount)
        if amount > self.limit:
            logger.info(
                f"Blocked withdrawal of {format_amount(amount)} on {self.account_number}, "
                f"limit is {format_amount(self.limit)}"
            )
            raise LimitExceeded(f"Withdrawal limit is {format_amount(self.limit)}.")
        super().withdraw(amount)
