"""YAMLのレイアウト定義からBlock Kitペイロードを組み立てるモジュール"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field, ValidationError

from slack_block_builder.composites import ConfirmObject, OptionalFieldPolicy
from slack_block_builder.contracts import BlockKitObject
from slack_block_builder.elements import CheckboxesElement

logger = logging.getLogger(__name__)


class OptionLayout(BaseModel):
    """選択肢の定義"""

    text: str
    value: str
    description: str | None = None
    url: str | None = None

    model_config = {"extra": "forbid"}


class InitialOptionLayout(BaseModel):
    """初期選択肢の定義（optionsのtext・valueで指定する）"""

    text: str
    value: str

    model_config = {"extra": "forbid"}


class ConfirmLayout(BaseModel):
    """確認ダイアログの定義（未指定の項目はデフォルト値のまま）"""

    title: str | None = None
    text: str | None = None
    confirm: str | None = None
    deny: str | None = None
    style: Literal["primary", "danger"] | None = None

    model_config = {"extra": "forbid"}

    def apply(self, confirm: ConfirmObject) -> None:
        """定義済みの項目をConfirmObjectに設定する"""
        if self.title is not None:
            confirm.set_title(self.title)
        if self.text is not None:
            confirm.set_text(self.text)
        if self.confirm is not None:
            confirm.set_confirm(self.confirm)
        if self.deny is not None:
            confirm.set_deny(self.deny)
        if self.style is not None:
            confirm.set_style(self.style)


class CheckboxesLayout(BaseModel):
    """チェックボックス要素の定義"""

    type: Literal["checkboxes"] = "checkboxes"
    action_id: str | None = None
    options: list[OptionLayout] = Field(default_factory=list)
    initial_options: list[InitialOptionLayout] = Field(default_factory=list)
    confirm: ConfirmLayout | None = None
    focus_on_load: bool | None = None

    model_config = {"extra": "forbid"}


def load_layout(layout_path: Path) -> CheckboxesLayout:
    """YAMLファイルからレイアウト定義を読み込む

    Args:
        layout_path: レイアウト定義ファイルのパス

    Returns:
        CheckboxesLayout: レイアウト定義

    Raises:
        FileNotFoundError: ファイルが存在しない場合
        ValueError: ファイルが空・YAMLとして不正・スキーマに合わない場合
    """
    if not layout_path.exists():
        msg = f"Layout file not found: {layout_path}"
        raise FileNotFoundError(msg)

    try:
        with layout_path.open() as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        msg = f"Invalid YAML file: {e}"
        raise ValueError(msg) from e

    if data is None:
        msg = f"Layout file is empty: {layout_path}"
        raise ValueError(msg)

    try:
        return CheckboxesLayout.model_validate(data)
    except ValidationError as e:
        msg = f"Invalid layout: {e}"
        raise ValueError(msg) from e


def build_checkboxes(layout: CheckboxesLayout, strict_initial_options: bool = True) -> CheckboxesElement:
    """レイアウト定義からCheckboxesElementを組み立てる

    Raises:
        BlockKitValidationError: 定義内容がBlock Kitの制約に違反する場合
    """
    element = CheckboxesElement(strict_initial_options=strict_initial_options)

    if layout.action_id is not None:
        element.set_action_id(layout.action_id)
    for option in layout.options:
        element.add_option(option.text, option.value, description=option.description, url=option.url)
    for initial in layout.initial_options:
        element.add_initial_option(initial.text, initial.value)
    if layout.confirm is not None:
        element.set_confirm(layout.confirm.apply)
    if layout.focus_on_load is not None:
        element.set_focus_on_load(layout.focus_on_load)

    logger.debug(
        "Built checkboxes element: action_id=%s, options=%d, initial_options=%d",
        layout.action_id,
        len(layout.options),
        len(layout.initial_options),
    )
    return element


def render_json(
    obj: BlockKitObject,
    policy: OptionalFieldPolicy | str = OptionalFieldPolicy.PRESENCE,
    indent: int | None = 2,
) -> str:
    """Block KitオブジェクトをJSON文字列に変換する"""
    return json.dumps(obj.to_dict(policy), ensure_ascii=False, indent=indent)
