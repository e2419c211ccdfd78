from .entity import FlightOrder as FlightOrder
from .enum import OrderStatus as OrderStatus
from .event import OrderConfirmed as OrderConfirmed
from .factory import FlightOrderFactory as FlightOrderFactory
from .pipeline import OrderContext as OrderContext
from .pipeline import OrderProcessingPipeline as OrderProcessingPipeline
from .value_object import Customer as Customer
from .value_object import OrderId as OrderId
