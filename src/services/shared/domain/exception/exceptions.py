from enum import Enum


class DomainException(Exception):
    """ドメイン層で発生する基底例外"""

    pass


class BusinessRuleViolationException(DomainException):
    """ビジネスルールに違反した場合"""

    pass


class OptimisticLockException(DomainException):
    """楽観ロックの競合エラー（残高などが期待値と異なる場合）"""

    pass


class ConfigurationException(DomainException):
    """必要な設定（決済手段など）が行われていない場合

    呼び出し側の設定ミスであり、内部でリカバリしない。
    """

    pass


class PipelineInputException(DomainException):
    """注文処理パイプラインに注文・コンテキストが渡されなかった場合"""

    pass


class PaymentRejectionReason(str, Enum):
    """決済拒否の理由"""

    # 同じ決済手段でのリトライは無意味
    INVALID_CREDENTIAL = "INVALID_CREDENTIAL"
    # 別の決済手段を提示する余地がある
    INSUFFICIENT_FUNDS = "INSUFFICIENT_FUNDS"


class PaymentRejectedException(DomainException):
    """決済が拒否された場合

    reason で「認証情報の不備」と「残高・限度額不足」を区別できる。
    """

    def __init__(self, message: str, reason: PaymentRejectionReason) -> None:
        super().__init__(message)
        self.reason = reason

    @property
    def is_retryable_with_other_method(self) -> bool:
        """別の決済手段で再試行する価値があるか"""
        return self.reason == PaymentRejectionReason.INSUFFICIENT_FUNDS
