"""Cash on delivery payment."""

import logging
from decimal import Decimal

from foodmate.payments.base_payment import PaymentMethod

logger = logging.getLogger(__name__)


class CashOnDelivery(PaymentMethod):
    """Cash on delivery, which always succeeds at checkout."""

    def __init__(self) -> None:
        super().__init__("Cash On Delivery (COD)")

    def process_payment(self, amount: Decimal) -> bool:
        logger.info(f"Cash on delivery confirmed for ${amount}")
        return True
