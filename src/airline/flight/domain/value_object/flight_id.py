from __future__ import annotations

import uuid
from dataclasses import dataclass


@dataclass(frozen=True)
class FlightId:
    """フライトID"""

    value: str

    def __str__(self) -> str:
        return self.value

    @classmethod
    def generate(cls) -> FlightId:
        """新しい FlightId を採番する"""
        return cls(value=str(uuid.uuid4()))
