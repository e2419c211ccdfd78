from .credit_card import CreditCard as CreditCard
from .paypal_credential import PayPalCredential as PayPalCredential
