from .order_status import OrderStatus as OrderStatus
