from .flight_order_factory import FlightOrderFactory as FlightOrderFactory
