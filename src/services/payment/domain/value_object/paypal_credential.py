from dataclasses import dataclass, field


@dataclass(frozen=True)
class PayPalCredential:
    """PayPal の認証情報（メールアドレス + パスワード）"""

    email: str
    password: str = field(repr=False)

    def is_present(self) -> bool:
        return bool(self.email) and bool(self.password)
