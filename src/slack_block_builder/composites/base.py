"""Block Kitオブジェクトの共通基盤

各composite/elementはBlockKitModelを継承し、フィールドの代入時点で制約を検証する。
pydanticの検証エラーはBlockKitValidationErrorに変換して呼び出し元に伝える。
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError

from slack_block_builder.exceptions import BlockKitValidationError


_UNSET = object()


class OptionalFieldPolicy(str, Enum):
    """任意フィールドを出力に含めるかどうかの判定基準"""

    # 設定済み（None以外）であれば出力する。明示的なFalseも残る
    PRESENCE = "presence"
    # 真と評価される値のみ出力する。False・空リスト・空文字列は落ちる
    TRUTHY = "truthy"


def merge_fields(
    required: dict[str, Any],
    optional: dict[str, Any],
    policy: OptionalFieldPolicy | str = OptionalFieldPolicy.PRESENCE,
) -> dict[str, Any]:
    """必須フィールドの後ろに、policyで選別した任意フィールドを結合する

    Args:
        required: 常に出力するフィールド
        optional: 未設定の場合はNoneを値に持つ任意フィールド
        policy: 任意フィールドの選別基準

    Returns:
        必須フィールド → 任意フィールドの順に並んだ辞書
    """
    if OptionalFieldPolicy(policy) is OptionalFieldPolicy.TRUTHY:
        kept = {key: value for key, value in optional.items() if value}
    else:
        kept = {key: value for key, value in optional.items() if value is not None}
    return {**required, **kept}


@contextmanager
def translate_validation_errors() -> Iterator[None]:
    """pydanticの検証エラーをBlockKitValidationErrorに変換する"""
    try:
        yield
    except PydanticValidationError as e:
        error = e.errors()[0]
        cause = error.get("ctx", {}).get("error")
        if isinstance(cause, BlockKitValidationError):
            raise cause from e

        field = ".".join(str(part) for part in error["loc"]) or None
        message = str(cause) if cause is not None else error["msg"]
        if field is not None and cause is None:
            message = f"{field}: {message}"
        raise BlockKitValidationError(message, field=field) from e


class BlockKitModel(BaseModel):
    """Block Kitのcomposite/elementの基底クラス

    ビルダーとして段階的に組み立てるため、frozenにはせず代入時に検証する。
    代入が検証で拒否された場合、フィールドは代入前の値に戻る。
    出力用のto_dict()は各サブクラスが実装する（contracts.BlockKitObjectを参照）。
    """

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    def __init__(self, **data: Any) -> None:
        with translate_validation_errors():
            super().__init__(**data)

    def __setattr__(self, name: str, value: Any) -> None:
        # model_validator(mode="after")での拒否は、pydanticが値を書き込んだ後に起こる
        previous = self.__dict__.get(name, _UNSET)
        try:
            with translate_validation_errors():
                super().__setattr__(name, value)
        except BlockKitValidationError:
            if previous is not _UNSET:
                self.__dict__[name] = previous
            raise
