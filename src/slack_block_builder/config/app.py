"""アプリケーション設定"""

from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError

from slack_block_builder.composites.base import OptionalFieldPolicy


class AppConfig(BaseModel):
    """アプリケーション設定"""

    optional_field_policy: OptionalFieldPolicy = Field(
        default=OptionalFieldPolicy.PRESENCE,
        description="任意フィールドの出力基準（presence: 設定済みなら出力 / truthy: 真の値のみ出力）",
    )
    strict_initial_options: bool = Field(default=True, description="initial_optionsをoptionsの部分集合に制限するか")
    json_indent: int | None = Field(default=2, ge=0, description="JSON出力のインデント幅（Noneで1行）")

    model_config = {"extra": "forbid"}


def load_app_config(config_path: Path) -> AppConfig:
    """YAMLファイルからAppConfigを読み込む

    Args:
        config_path: 設定ファイルのパス

    Returns:
        AppConfig: アプリケーション設定

    Raises:
        FileNotFoundError: 設定ファイルが存在しない場合
        ValueError: 設定ファイルが不正な場合
    """
    if not config_path.exists():
        msg = f"Config file not found: {config_path}"
        raise FileNotFoundError(msg)

    try:
        with config_path.open() as f:
            data = yaml.safe_load(f)
            if data is None:
                data = {}
            return AppConfig(**data)
    except yaml.YAMLError as e:
        msg = f"Invalid YAML file: {e}"
        raise ValueError(msg) from e
    except ValidationError as e:
        msg = f"Invalid configuration: {e}"
        raise ValueError(msg) from e
