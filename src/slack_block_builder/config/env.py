"""環境変数設定"""

import os
from typing import Literal

from pydantic import BaseModel, Field, ValidationError

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class EnvConfig(BaseModel):
    """環境変数設定"""

    log_level: LogLevel = Field(default="INFO", description="ログレベル")

    model_config = {"extra": "forbid"}


def load_env_config() -> EnvConfig:
    """環境変数からEnvConfigを読み込む

    BLOCK_KIT_LOG_LEVELが未設定の場合はINFOになる。

    Returns:
        EnvConfig: 環境変数設定

    Raises:
        ValueError: 環境変数の値が不正な場合
    """
    try:
        return EnvConfig(log_level=os.environ.get("BLOCK_KIT_LOG_LEVEL", "INFO").upper())
    except ValidationError as e:
        msg = f"Invalid environment variable: {e}"
        raise ValueError(msg) from e
