import re
from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class AirportCode:
    """空港コード（IATA）

    英字3文字。大文字に正規化して保持する。
    例: OPO, LIS, FAO
    """

    value: str

    PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"^[A-Z]{3}$")

    def __post_init__(self) -> None:
        normalized = self.value.upper()
        if not self.PATTERN.match(normalized):
            raise ValueError(
                f"Invalid airport code: {self.value}. "
                "Expected format: LIS (3 letters)"
            )
        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value

    def matches(self, code: str) -> bool:
        """大文字小文字を区別せずにコードを比較する"""
        return self.value.casefold() == code.casefold()
