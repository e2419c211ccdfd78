from .payment_method_details import CreditCardDetails as CreditCardDetails
from .payment_method_details import PaymentMethodDetails as PaymentMethodDetails
from .payment_method_details import PayPalDetails as PayPalDetails
from .payment_strategy_factory import PaymentStrategyFactory as PaymentStrategyFactory
