"""
Account Management Module

A single bank account: balance, lifecycle state and the observers that
are notified after each deposit, withdrawal or closure. AccountInterface
is the capability that decorators wrap.
"""

from abc import ABC, abstractmethod
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, Iterable, Optional

from .config import get_config
from .errors import InsufficientFunds, InvalidOperation, NegativeAmount
from .events import ObserverLike, ObserverRegistry
from .logging_config import get_logger
from .money import Numeric, add_amounts, format_amount, subtract_amounts, to_amount


logger = get_logger("guarded_account.accounts")


class AccountState(Enum):
    """Account lifecycle states"""
    ACTIVE = "active"      # Normal operation
    CLOSED = "closed"      # Permanently closed


class AccountInterface(ABC):
    """Operations shared by accounts and the decorators that wrap them"""

    @property
    @abstractmethod
    def account_number(self) -> str:
        pass

    @property
    @abstractmethod
    def is_active(self) -> bool:
        pass

    @abstractmethod
    def deposit(self, amount: Numeric) -> None:
        pass

    @abstractmethod
    def withdraw(self, amount: Numeric) -> None:
        pass

    @abstractmethod
    def get_balance(self) -> Decimal:
        pass

    @abstractmethod
    def close(self) -> None:
        pass

    @abstractmethod
    def add_observer(self, observer: ObserverLike) -> None:
        pass


class Account(AccountInterface):
    """
    Bank account holding a Decimal balance

    Once closed the account rejects every change with InvalidOperation
    but its balance and details remain readable.
    """

    def __init__(
        self,
        account_number: str,
        initial_balance: Numeric = Decimal('0'),
        observers: Optional[Iterable[ObserverLike]] = None,
        isolate_observer_errors: Optional[bool] = None
    ):
        """
        Args:
            account_number: Opaque identifier, fixed for the account's lifetime
            initial_balance: Opening balance, must not be negative
            observers: Observers to register immediately, in order
            isolate_observer_errors: Keep notifying after an observer fails
                (defaults to the configured isolate_observer_errors)
        """
        if not account_number:
            raise ValueError("Account number must be a non-empty string")

        balance = to_amount(initial_balance)
        if balance < 0:
            raise NegativeAmount(f"Initial balance cannot be negative: {format_amount(balance)}")

        if isolate_observer_errors is None:
            isolate_observer_errors = get_config().isolate_observer_errors

        self._account_number = str(account_number)
        self._balance = balance
        self._state = AccountState.ACTIVE
        self._observers = ObserverRegistry(isolate_errors=isolate_observer_errors)

        for observer in observers or ():
            self._observers.subscribe(observer)

        logger.debug(f"Opened account {self._account_number} with {format_amount(balance)}")

    def __repr__(self) -> str:
        return f"Account({self._account_number!r}, balance={self._balance}, state={self._state.value})"

    @property
    def account_number(self) -> str:
        return self._account_number

    @property
    def state(self) -> AccountState:
        return self._state

    @property
    def is_active(self) -> bool:
        return self._state == AccountState.ACTIVE

    @property
    def observers(self) -> ObserverRegistry:
        return self._observers

    def _require_active(self, operation: str) -> None:
        if not self.is_active:
            logger.info(f"Rejected {operation} on closed account {self._account_number}")
            raise InvalidOperation(f"Account is closed. Can't {operation}.")

    def deposit(self, amount: Numeric) -> None:
        """
        Add funds to the account

        Raises:
            InvalidOperation: If the account is closed
            NegativeAmount: If amount is below zero
        """
        self._require_active("deposit")
        amount = to_amount(amount)
        if amount < 0:
            logger.info(f"Rejected negative deposit on {self._account_number}")
            raise NegativeAmount("No negative deposits allowed!")

        display = format_amount(amount)
        self._balance = add_amounts(self._balance, amount)
        logger.debug(f"Deposited {display} to {self._account_number}")
        self.notify_observers(f"Deposited {display}")

    def withdraw(self, amount: Numeric) -> None:
        """
        Remove funds from the account. Withdrawing the whole balance is allowed.

        Raises:
            InvalidOperation: If the account is closed
            NegativeAmount: If amount is below zero
            InsufficientFunds: If amount is greater than the balance
        """
        self._require_active("withdraw")
        amount = to_amount(amount)
        if amount < 0:
            logger.info(f"Rejected negative withdrawal on {self._account_number}")
            raise NegativeAmount("No negative withdrawals allowed!")
        if amount > self._balance:
            logger.info(f"Rejected overdraw of {format_amount(amount)} on {self._account_number}")
            raise InsufficientFunds(f"Not enough funds. Balance: {format_amount(self._balance)}")

        display = format_amount(amount)
        self._balance = subtract_amounts(self._balance, amount)
        logger.debug(f"Withdrew {display} from {self._account_number}")
        self.notify_observers(f"Withdrew {display}")

    def get_balance(self) -> Decimal:
        return self._balance

    def close(self) -> None:
        """
        Close the account permanently

        Raises:
            InvalidOperation: If the account is already closed
        """
        self._require_active("close")
        self._state = AccountState.CLOSED
        logger.debug(f"Closed account {self._account_number}")
        self.notify_observers("Account has been closed.")

    def add_observer(self, observer: ObserverLike) -> None:
        self._require_active("add observer")
        self._observers.subscribe(observer)

    def notify_observers(self, message: str) -> None:
        self._observers.publish(message)

    def details(self) -> Dict[str, Any]:
        """Account number, balance and state for display"""
        return {
            'account_number': self._account_number,
            'balance': self._balance,
            'state': self._state.value
        }
