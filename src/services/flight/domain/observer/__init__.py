from .flight_event_publisher import FlightEventPublisher as FlightEventPublisher
from .flight_event_publisher import Subscription as Subscription
from .flight_observer import FlightObserver as FlightObserver
