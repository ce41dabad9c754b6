"""
Console Session Module

Runs the fixed prompt sequence: open an account, deposit, withdraw through
the withdrawal-limit decorator, show the final balance and optionally
close the account. The first failure ends the session.
"""

from typing import Callable, Optional
import sys

from .accounts import Account
from .config import GuardedAccountConfig, get_config
from .decorators import WithdrawalLimitDecorator
from .errors import BankingError
from .events import StructuredLogObserver, TransactionLogger
from .logging_config import get_logger, setup_logging
from .money import format_amount, to_amount


logger = get_logger("guarded_account.cli")

InputFunc = Callable[[str], str]
OutputFunc = Callable[[str], None]


def _prompt_amount(input_func: InputFunc, prompt: str):
    return to_amount(input_func(prompt))


def run_session(
    input_func: Optional[InputFunc] = None,
    output: Optional[OutputFunc] = None,
    settings: Optional[GuardedAccountConfig] = None
) -> int:
    """
    Run one console session

    Args:
        input_func: Reads a line after showing a prompt (defaults to input)
        output: Writes one line of output (defaults to print)
        settings: Configuration (defaults to the global configuration)

    Returns:
        0 when every step completed, 1 when the session was aborted
    """
    input_func = input_func or input
    output = output or print
    settings = settings or get_config()

    try:
        initial_balance = _prompt_amount(input_func, "Enter initial balance: ")
        account = Account(
            settings.account_number,
            initial_balance,
            isolate_observer_errors=settings.isolate_observer_errors
        )

        output(f"Account Number: {account.account_number}")
        output(f"Initial Balance: {format_amount(account.get_balance())}")

        account.add_observer(TransactionLogger(output=output))
        account.add_observer(StructuredLogObserver(resource=account.account_number))

        secure_account = WithdrawalLimitDecorator(account, limit=settings.withdrawal_limit)

        secure_account.deposit(_prompt_amount(input_func, "Enter amount to deposit: "))
        secure_account.withdraw(_prompt_amount(input_func, "Enter amount to withdraw: "))

        output(f"Final balance: {format_amount(secure_account.get_balance())}")

        answer = input_func("Close account? (yes/no): ")
        if answer.strip().lower() == "yes":
            secure_account.close()
            output("Account closed.")

    except BankingError as e:
        logger.info(f"Session aborted by {type(e).__name__}: {e}")
        output(f"Banking Error: {e}")
        return 1
    except Exception as e:
        logger.error(f"Session aborted unexpectedly: {e!r}")
        output(f"Something went wrong: {e}")
        return 1

    return 0


def main() -> None:
    """Console entry point"""
    settings = get_config()
    setup_logging(level=settings.log_level, log_format=settings.log_format)
    sys.exit(run_session(settings=settings))


if __name__ == "__main__":
    main()
