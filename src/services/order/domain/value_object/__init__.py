from .customer import Customer as Customer
from .order_id import OrderId as OrderId
