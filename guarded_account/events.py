"""
Event System Module

Observer pattern for account notifications. An account owns an
ObserverRegistry; after every successful state change it publishes a
human-readable message to each registered observer in subscription order.
"""

from abc import ABC, abstractmethod
from typing import Callable, Iterator, List, Optional, Union
import logging

from .logging_config import get_logger, log_action


class Observer(ABC):
    """Notification sink for account activity"""

    @abstractmethod
    def update(self, message: str) -> None:
        """Receive a message describing a completed operation"""
        pass


ObserverLike = Union[Observer, Callable[[str], None]]


def _handler_name(handler) -> str:
    return getattr(handler, '__qualname__', None) or repr(handler)


class ObserverRegistry:
    """Ordered, append-only set of notification callbacks"""

    def __init__(self, isolate_errors: bool = True):
        self._handlers: List[Callable[[str], None]] = []
        self.isolate_errors = isolate_errors
        self.logger = get_logger("guarded_account.events")

    def subscribe(self, observer: ObserverLike) -> None:
        """Register an Observer or a plain callable; duplicates are kept"""
        handler = getattr(observer, 'update', observer)
        if not callable(handler):
            raise TypeError(f"Observer {observer!r} has no callable update()")
        self._handlers.append(handler)
        self.logger.debug(f"Subscribed handler {_handler_name(handler)}")

    def publish(self, message: str) -> None:
        """Deliver message to every handler, in subscription order"""
        self.logger.debug(f"Publishing '{message}' to {len(self._handlers)} handler(s)")

        for handler in list(self._handlers):
            if not self.isolate_errors:
                handler(message)
                continue
            try:
                handler(message)
            except Exception as e:
                # Log but don't break the main operation
                self.logger.error(f"Error in observer {_handler_name(handler)} for '{message}': {e}")

    def get_handler_count(self) -> int:
        return len(self._handlers)

    def __len__(self) -> int:
        return len(self._handlers)

    def __iter__(self) -> Iterator[Callable[[str], None]]:
        return iter(list(self._handlers))


class TransactionLogger(Observer):
    """Writes every notification to the console"""

    def __init__(self, output: Callable[[str], None] = print, prefix: str = ">> LOG: "):
        self.output = output
        self.prefix = prefix

    def update(self, message: str) -> None:
        self.output(f"{self.prefix}{message}")


class StructuredLogObserver(Observer):
    """Forwards notifications to Python logging as structured records"""

    def __init__(self, logger: Optional[logging.Logger] = None, level: str = "info",
                 resource: Optional[str] = None):
        self.logger = logger or get_logger("guarded_account.transactions")
        self.level = level
        self.resource = resource

    def update(self, message: str) -> None:
        log_action(
            self.logger, self.level, message,
            action="account_notification",
            resource=self.resource
        )
