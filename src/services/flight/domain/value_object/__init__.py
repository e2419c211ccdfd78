from .flight_number import FlightNumber as FlightNumber
from .passenger import Passenger as Passenger
