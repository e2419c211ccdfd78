from __future__ import annotations

import calendar
import re
from dataclasses import dataclass, field
from datetime import date
from typing import ClassVar


@dataclass(frozen=True)
class CreditCard:
    """クレジットカード（Value Object）

    カード番号はスペース・ハイフンを除去して保持する。
    CVV は repr に含めない。
    """

    NUMBER_PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"^\d{13,19}$")
    CVV_PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"^\d{3,4}$")

    number: str
    expiration_date: date
    cvv: str = field(repr=False)

    def __post_init__(self) -> None:
        normalized = re.sub(r"[\s-]", "", self.number)
        object.__setattr__(self, "number", normalized)

    @property
    def masked_number(self) -> str:
        """下4桁以外を伏せたカード番号"""
        return "*" * (len(self.number) - 4) + self.number[-4:]

    def is_well_formed(self) -> bool:
        """番号・CVV の形式が正しいか"""
        if not self.NUMBER_PATTERN.match(self.number):
            return False
        if not self.CVV_PATTERN.match(self.cvv) or self.cvv == "000":
            return False
        return self._luhn_check(self.number)

    def is_expired(self, today: date) -> bool:
        """有効期限切れか（有効期限月の末日までは有効）"""
        last_day = calendar.monthrange(
            self.expiration_date.year, self.expiration_date.month
        )[1]
        valid_through = self.expiration_date.replace(day=last_day)
        return today > valid_through

    def is_valid(self, today: date) -> bool:
        return self.is_well_formed() and not self.is_expired(today)

    @staticmethod
    def _luhn_check(number: str) -> bool:
        checksum = 0
        for i, digit in enumerate(int(d) for d in reversed(number)):
            if i % 2 == 1:
                digit *= 2
                if digit > 9:
                    digit -= 9
            checksum += digit
        return checksum % 10 == 0
