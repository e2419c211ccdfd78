from .aircraft_capacity import AircraftCapacity as AircraftCapacity
from .capacity_provider import CapacityProvider as CapacityProvider
