"""
Banking Error Module

Domain-specific errors raised by accounts and account decorators.
All of them are ValueErrors so callers that only care about rejected
input can keep catching ValueError.
"""


class BankingError(ValueError):
    """Base class for rejected banking operations"""
    pass


class NegativeAmount(BankingError):
    """Raised when a deposit, withdrawal or opening balance is below zero"""
    pass


class InsufficientFunds(BankingError):
    """
    Raised when a withdrawal is larger than the current balance.
    The balance is left untouched.
    """
    pass


class InvalidOperation(BankingError):
    """Raised when a closed account is asked to change"""
    pass


class LimitExceeded(BankingError):
    """Raised by a policy decorator when an amount breaks its ceiling"""
    pass
