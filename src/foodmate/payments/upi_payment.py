"""UPI payment simulation."""

import logging
import random
from decimal import Decimal

from foodmate.payments.base_payment import PaymentMethod

logger = logging.getLogger(__name__)


class UPIPayment(PaymentMethod):
    """UPI payment that succeeds with a fixed probability.

    The random source is injectable so outcomes can be made deterministic.
    """

    def __init__(self, success_rate: float = 0.9, rng: random.Random | None = None) -> None:
        """Initialize UPI payment.

        Args:
            success_rate: Probability between 0 and 1 that a payment succeeds
            rng: Random source, a fresh random.Random when omitted

        Raises:
            ValueError: If success_rate is outside [0, 1]
        """
        super().__init__("UPI")
        if not 0.0 <= success_rate <= 1.0:
            raise ValueError("success_rate must be between 0 and 1")

        self.success_rate = success_rate
        self.rng = rng or random.Random()

    def process_payment(self, amount: Decimal) -> bool:
        """Simulate a UPI charge.

        Args:
            amount: Amount to charge

        Returns:
            bool: True if the simulated charge went through
        """
        logger.info(f"Processing UPI payment of ${amount}")
        approved = self.rng.random() < self.success_rate
        if not approved:
            logger.warning(f"UPI payment of ${amount} declined")
        return approved
