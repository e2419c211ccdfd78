from abc import ABC, abstractmethod

from services.shared.domain import Money


class BalanceLedger(ABC):
    """決済手段ごとの残高台帳のインターフェース

    Domain 層で定義し、具象実装は Infrastructure 層で行う。
    """

    @abstractmethod
    def balance_of(self, instrument_id: str) -> Money | None:
        """現在の残高を返す（未登録なら None）"""
        raise NotImplementedError

    @abstractmethod
    def update_balance(
        self,
        instrument_id: str,
        balance: Money,
        expected_balance: Money | None = None,
    ) -> None:
        """残高を更新する

        expected_balance を指定した場合、現在の残高が一致しなければ
        OptimisticLockException を送出する。
        """
        raise NotImplementedError
