"""
Guarded Account

A single bank account with observer-based transaction logging and
composable policy decorators, using Decimal for every amount.
"""

from .errors import (
    BankingError, NegativeAmount, InsufficientFunds, InvalidOperation, LimitExceeded
)
from .events import Observer, ObserverRegistry, TransactionLogger, StructuredLogObserver
from .accounts import AccountInterface, Account, AccountState
from .decorators import AccountDecorator, WithdrawalLimitDecorator

__version__ = "1.0.0"
