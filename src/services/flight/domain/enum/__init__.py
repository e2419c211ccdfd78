from .flight_status import FlightStatus as FlightStatus
