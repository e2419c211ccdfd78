from .order_confirmed import OrderConfirmed as OrderConfirmed
