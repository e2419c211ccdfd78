from .flight_order import FlightOrder as FlightOrder
