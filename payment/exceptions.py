from typing import Optional

from rest_framework.exceptions import ValidationError


VALID_PAYMENT_METHODS = ("CASH", "CREDIT")


class InvalidPaymentMethod(ValidationError):
    """Raised when a payment method is not one of CASH or CREDIT"""

    default_code = "invalid_payment_method"

    def __init__(self, method: Optional[str] = None) -> None:
        message = (
            f"Invalid payment method: {method}. "
            f"Valid methods are: {', '.join(VALID_PAYMENT_METHODS)}"
        )
        super().__init__({"method": [message]}, code=self.default_code)
        self.method = method
