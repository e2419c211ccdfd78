from abc import ABC, abstractmethod


class CredentialDirectory(ABC):
    """外部決済アカウントの認証情報ディレクトリのインターフェース"""

    @abstractmethod
    def find_secret(self, identifier: str) -> str | None:
        """識別子（メールアドレス等）に対応するシークレットを返す"""
        raise NotImplementedError
