"""Base class for simulated payment methods.

Payment methods return False for a declined payment rather than raising, and
the checkout layer decides what happens to the order.
"""

from abc import ABC, abstractmethod
from decimal import Decimal


class PaymentMethod(ABC):
    """Abstract base class for payment methods.

    All payment methods (UPI, cash on delivery, ...) must inherit from this
    class and implement process_payment.
    """

    def __init__(self, mode: str) -> None:
        """Initialize the payment method.

        Args:
            mode: Display name of the payment mode (e.g., 'UPI')
        """
        self.mode = mode

    @abstractmethod
    def process_payment(self, amount: Decimal) -> bool:
        """Charge the given amount.

        Args:
            amount: Amount to charge

        Returns:
            bool: True if the payment succeeded, False if it was declined
        """
        pass
