from dataclasses import dataclass

from .capacity_provider import CapacityProvider


@dataclass(frozen=True)
class AircraftCapacity(CapacityProvider):
    """機材モデルごとの定員（Value Object）

    例: AircraftCapacity("A380", passengers=500, crew=42)
    """

    model: str
    passengers: int
    crew: int

    def __post_init__(self) -> None:
        if self.passengers < 0 or self.crew < 0:
            raise ValueError("Capacity cannot be negative")

    def passenger_capacity(self) -> int:
        return self.passengers

    def crew_capacity(self) -> int:
        return self.crew
