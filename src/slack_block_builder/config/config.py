"""統合Config クラス"""

from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from slack_block_builder.composites.base import OptionalFieldPolicy
from slack_block_builder.config.app import AppConfig, load_app_config
from slack_block_builder.config.env import LogLevel, load_env_config


class Config(BaseModel):
    """統合設定クラス（環境変数 + アプリケーション設定）"""

    # 環境変数由来
    log_level: LogLevel = Field(default="INFO", description="ログレベル")

    # config.yaml由来
    optional_field_policy: OptionalFieldPolicy = Field(default=OptionalFieldPolicy.PRESENCE)
    strict_initial_options: bool = Field(default=True)
    json_indent: int | None = Field(default=2, ge=0)

    model_config = {"extra": "forbid"}


def load_config(config_path: Path | None = None) -> Config:
    """環境変数とYAMLファイルから統合設定を読み込む

    Args:
        config_path: YAMLファイルのパス。Noneの場合はアプリケーション設定をデフォルト値にする

    Returns:
        Config: 統合設定

    Raises:
        ValueError: 環境変数または設定ファイルが不正な場合
        FileNotFoundError: YAMLファイルが存在しない場合
    """
    # .envファイルを読み込み
    load_dotenv()

    env_config = load_env_config()
    app_config = load_app_config(config_path) if config_path is not None else AppConfig()

    return Config(
        log_level=env_config.log_level,
        optional_field_policy=app_config.optional_field_policy,
        strict_initial_options=app_config.strict_initial_options,
        json_indent=app_config.json_indent,
    )
