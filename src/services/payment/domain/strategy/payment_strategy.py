from abc import ABC, abstractmethod

from services.shared.domain import Money


class PaymentStrategy(ABC):
    """決済アルゴリズムのインターフェース

    注文に対しては状態を持たず、生成時に渡された決済手段
    （カード、認証情報など）だけを保持する。
    新しい決済手段はこのクラスを継承して追加する。
    パイプラインや注文の変更は不要。
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """決済手段名（例: "Credit Card", "PayPal"）"""
        raise NotImplementedError

    @abstractmethod
    def validate(self) -> bool:
        """決済情報が存在し、現時点で利用可能か"""
        raise NotImplementedError

    @abstractmethod
    def pay(self, amount: Money) -> bool:
        """指定金額を決済する

        自身で再検証し、不正な場合は即座に失敗する。リトライは行わない。

        Raises:
            PaymentRejectedException: 認証情報の不備、または残高・限度額不足
        """
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"
