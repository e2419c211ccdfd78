import threading

from services.payment.domain.repository import CredentialDirectory


class InMemoryCredentialDirectory(CredentialDirectory):
    """プロセス内で認証情報を保持する CredentialDirectory の具象実装"""

    def __init__(self, entries: dict[str, str] | None = None) -> None:
        self._entries: dict[str, str] = dict(entries or {})
        self._lock = threading.RLock()

    def register(self, identifier: str, secret: str) -> None:
        with self._lock:
            self._entries[identifier] = secret

    def find_secret(self, identifier: str) -> str | None:
        with self._lock:
            return self._entries.get(identifier)
