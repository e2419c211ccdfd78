from .capacity import AircraftCapacity as AircraftCapacity
from .capacity import CapacityProvider as CapacityProvider
from .entity import ScheduledFlight as ScheduledFlight
from .enum import FlightStatus as FlightStatus
from .observer import FlightEventPublisher as FlightEventPublisher
from .observer import FlightObserver as FlightObserver
from .observer import Subscription as Subscription
from .value_object import FlightNumber as FlightNumber
from .value_object import Passenger as Passenger
