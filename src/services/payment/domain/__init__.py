from .factory import CreditCardDetails as CreditCardDetails
from .factory import PaymentStrategyFactory as PaymentStrategyFactory
from .factory import PayPalDetails as PayPalDetails
from .repository import BalanceLedger as BalanceLedger
from .repository import CredentialDirectory as CredentialDirectory
from .strategy import CreditCardPaymentStrategy as CreditCardPaymentStrategy
from .strategy import PaymentStrategy as PaymentStrategy
from .strategy import PayPalPaymentStrategy as PayPalPaymentStrategy
from .value_object import CreditCard as CreditCard
from .value_object import PayPalCredential as PayPalCredential
