from __future__ import annotations

import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field

# 環境変数名 -> Settings のフィールド名
_ENV_FIELDS = {
    "FAILURE_RATE": "failure_rate",
    "ALLOW_CANCEL_CONFIRMED": "allow_cancel_confirmed",
}


class Settings(BaseModel):
    """アプリケーション設定

    コールドスタート時に一度だけ環境変数から読み込む。
    不正な値は ValidationError として起動時に失敗させる。
    """

    model_config = ConfigDict(frozen=True)

    failure_rate: float = Field(
        default=0.1,
        ge=0.0,
        le=1.0,
        description="確定・キャンセル時に擬似障害を発生させる確率",
    )

    allow_cancel_confirmed: bool = Field(
        default=True,
        description="CONFIRMED の予約のキャンセルを許可するか",
    )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """環境変数から設定を生成する"""
        env = os.environ if environ is None else environ
        values = {
            field: env[name] for name, field in _ENV_FIELDS.items() if name in env
        }
        return cls.model_validate(values)
