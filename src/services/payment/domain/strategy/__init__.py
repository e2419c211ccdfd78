from .credit_card_payment_strategy import (
    CreditCardPaymentStrategy as CreditCardPaymentStrategy,
)
from .payment_strategy import PaymentStrategy as PaymentStrategy
from .paypal_payment_strategy import PayPalPaymentStrategy as PayPalPaymentStrategy
