from abc import ABC, abstractmethod


class CapacityProvider(ABC):
    """機材の座席数を提供するインターフェース

    機材の種別判定や生成はフライト集約の関心外。
    ScheduledFlight は座席数の読み取りだけを行う。
    """

    @abstractmethod
    def passenger_capacity(self) -> int:
        """旅客定員"""
        raise NotImplementedError

    @abstractmethod
    def crew_capacity(self) -> int:
        """乗員定員"""
        raise NotImplementedError
