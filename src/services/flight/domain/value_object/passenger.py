from dataclasses import dataclass


@dataclass(frozen=True)
class Passenger:
    """搭乗者

    生成は呼び出し側の責務。同名の搭乗者は同一とみなす。
    """

    name: str

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValueError("Passenger name cannot be empty")

    def __str__(self) -> str:
        return self.name
