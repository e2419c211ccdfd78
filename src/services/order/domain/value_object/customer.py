from dataclasses import dataclass


@dataclass(frozen=True)
class Customer:
    """注文者"""

    name: str
    email: str

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Customer name cannot be empty")
