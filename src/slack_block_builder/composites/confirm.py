"""Block Kitの確認ダイアログオブジェクト"""

from __future__ import annotations

from typing import Any, Literal, Self

from pydantic import Field

from slack_block_builder.composites.base import BlockKitModel, OptionalFieldPolicy, merge_fields
from slack_block_builder.composites.text import PlainTextOnlyTextObject, TextObject

CONFIRM_TITLE_MAX_LENGTH = 100
CONFIRM_TEXT_MAX_LENGTH = 300
CONFIRM_BUTTON_MAX_LENGTH = 30


class ConfirmObject(BlockKitModel):
    """操作の前に表示する確認ダイアログ

    全フィールドにデフォルト値があり、引数なしで生成してからセッターで上書きする。
    """

    title: PlainTextOnlyTextObject = Field(
        default_factory=lambda: PlainTextOnlyTextObject("Are you sure?", CONFIRM_TITLE_MAX_LENGTH)
    )
    text: TextObject = Field(
        default_factory=lambda: TextObject("Please confirm this action.", CONFIRM_TEXT_MAX_LENGTH)
    )
    confirm: PlainTextOnlyTextObject = Field(
        default_factory=lambda: PlainTextOnlyTextObject("Yes", CONFIRM_BUTTON_MAX_LENGTH)
    )
    deny: PlainTextOnlyTextObject = Field(
        default_factory=lambda: PlainTextOnlyTextObject("No", CONFIRM_BUTTON_MAX_LENGTH)
    )
    style: Literal["primary", "danger"] | None = None

    def set_title(self, title: str) -> Self:
        """ダイアログのタイトルを設定する（最大100文字）"""
        self.title = PlainTextOnlyTextObject(title, CONFIRM_TITLE_MAX_LENGTH)
        return self

    def set_text(self, text: str) -> Self:
        """ダイアログの本文を設定する（最大300文字）"""
        self.text = TextObject(text, CONFIRM_TEXT_MAX_LENGTH)
        return self

    def set_confirm(self, label: str) -> Self:
        """確定ボタンのラベルを設定する（最大30文字）"""
        self.confirm = PlainTextOnlyTextObject(label, CONFIRM_BUTTON_MAX_LENGTH)
        return self

    def set_deny(self, label: str) -> Self:
        """キャンセルボタンのラベルを設定する（最大30文字）"""
        self.deny = PlainTextOnlyTextObject(label, CONFIRM_BUTTON_MAX_LENGTH)
        return self

    def set_style(self, style: Literal["primary", "danger"]) -> Self:
        """確定ボタンの配色を設定する"""
        self.style = style
        return self

    def to_dict(self, policy: OptionalFieldPolicy | str = OptionalFieldPolicy.PRESENCE) -> dict[str, Any]:
        return merge_fields(
            {
                "title": self.title.to_dict(policy),
                "text": self.text.to_dict(policy),
                "confirm": self.confirm.to_dict(policy),
                "deny": self.deny.to_dict(policy),
            },
            {"style": self.style},
            policy,
        )
