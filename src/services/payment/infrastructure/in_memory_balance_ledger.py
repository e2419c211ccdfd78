import threading

from services.payment.domain.repository import BalanceLedger
from services.shared.domain import Money
from services.shared.domain.exception import OptimisticLockException


class InMemoryBalanceLedger(BalanceLedger):
    """プロセス内で残高を保持する BalanceLedger の具象実装"""

    def __init__(self) -> None:
        self._balances: dict[str, Money] = {}
        self._lock = threading.RLock()

    def open_account(self, instrument_id: str, balance: Money) -> None:
        """決済手段を台帳に登録する"""
        with self._lock:
            self._balances[instrument_id] = balance

    def balance_of(self, instrument_id: str) -> Money | None:
        with self._lock:
            return self._balances.get(instrument_id)

    def update_balance(
        self,
        instrument_id: str,
        balance: Money,
        expected_balance: Money | None = None,
    ) -> None:
        with self._lock:
            current = self._balances.get(instrument_id)
            if expected_balance is not None and current != expected_balance:
                raise OptimisticLockException(
                    f"Balance conflict: expected {expected_balance}, "
                    f"actual {current}"
                )
            self._balances[instrument_id] = balance
