"""
Stock status notifications (Observer pattern).

The Stock keeps an ordered list of observers and pushes a message to each of
them whenever its status changes. Customers are the observers in the demo.

Design decisions:
- Synchronous delivery, observers are called in registration order
- No deduplication (an observer added twice is notified twice)
- Setting the status is the only thing that triggers notifications
- Observer exceptions propagate to the caller
"""

import logging
from typing import Optional

from shopping import messages
from shopping.models import Writer

logger = logging.getLogger("stock")


class Observer:
    """Interface for anything that wants stock notifications."""

    def update(self, message: str) -> None:
        raise NotImplementedError("Observer subclasses must implement 'update'")


class Customer(Observer):
    """
    A customer subscribed to stock updates.

    Writes every message it receives prefixed with its name. Holds no state
    beyond its name.
    """

    def __init__(self, name: str, output: Writer = print):
        """
        Initialize the customer.

        Args:
            name: Display name, used as the prefix of each notification line
            output: Where notification lines are written (stdout by default)
        """
        self.name = name
        self.output = output

    def update(self, message: str) -> None:
        self.output(messages.render(messages.CUSTOMER_NOTIFICATION, name=self.name, message=message))

    def __repr__(self) -> str:
        return f"Customer(name={self.name!r})"


class Stock:
    """
    Stock item that notifies its observers when its status changes.

    Example usage:
        stock = Stock()
        stock.add_observer(Customer("Ali"))
        stock.set_stock_status("Stok var.")
        # prints "Ali: Stok durumu değişti: Stok var."
    """

    def __init__(self):
        self._observers: list[Observer] = []
        self._status: Optional[str] = None

    @property
    def status(self) -> Optional[str]:
        """Current stock status, None until it is first set."""
        return self._status

    def add_observer(self, observer: Observer) -> None:
        """
        Register an observer.

        Note: The same observer can be added multiple times (will be notified multiple times).
        """
        self._observers.append(observer)
        logger.debug(f"Added observer {observer!r} ({len(self._observers)} registered)")

    def remove_observer(self, observer: Observer) -> bool:
        """
        Remove the first registration of an observer.

        Returns:
            True if the observer was found and removed, False otherwise
        """
        try:
            self._observers.remove(observer)
            logger.debug(f"Removed observer {observer!r}")
            return True
        except ValueError:
            return False

    def set_stock_status(self, status: str) -> int:
        """
        Store a new status and notify every observer.

        Args:
            status: The new stock status

        Returns:
            Number of observers notified
        """
        self._status = status
        logger.info(f"Stock status set to {status!r}")
        return self._notify_observers()

    def _notify_observers(self) -> int:
        message = messages.render(messages.STOCK_STATUS_CHANGED, status=self._status)

        observers = list(self._observers)
        for observer in observers:
            observer.update(message)

        if not observers:
            logger.warning("Stock status changed but no observers are registered")

        return len(observers)

    def get_observer_count(self) -> int:
        """Get the number of registered observers."""
        return len(self._observers)
