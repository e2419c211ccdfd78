from .scheduled_flight import ScheduledFlight as ScheduledFlight
