"""Block Kitのオプションオブジェクト"""

from __future__ import annotations

from typing import Any, Self

from pydantic import field_validator

from slack_block_builder.composites.base import BlockKitModel, OptionalFieldPolicy, merge_fields
from slack_block_builder.composites.text import PlainTextOnlyTextObject, TextObject
from slack_block_builder.exceptions import BlockKitValidationError

OPTION_TEXT_MAX_LENGTH = 75
OPTION_VALUE_MAX_LENGTH = 75
OPTION_DESCRIPTION_MAX_LENGTH = 75
OPTION_URL_MAX_LENGTH = 3000


class OptionObject(BlockKitModel):
    """チェックボックスやセレクトメニューの選択肢

    text・valueは必須のためコンストラクタ引数で受け取り、未設定のオプションは作れない。
    description・urlは任意で、設定された場合のみ出力に含まれる。
    """

    # オプションの表示テキスト（最大75文字）
    text: TextObject
    # 選択時にアプリへ送られる値（最大75文字）
    value: str
    # 表示テキストの下に出る説明文（plain_textのみ、最大75文字）
    description: PlainTextOnlyTextObject | None = None
    # クリック時に開くURL（overflowメニューのみ有効、最大3000文字）
    url: str | None = None

    def __init__(self, text: str | TextObject, value: str, **data: Any) -> None:
        if isinstance(text, str):
            text = TextObject(text, OPTION_TEXT_MAX_LENGTH)
        super().__init__(text=text, value=value, **data)

    @field_validator("text")
    @classmethod
    def _validate_text(cls, text: TextObject) -> TextObject:
        if len(text.text) > OPTION_TEXT_MAX_LENGTH:
            msg = f"Text must be at most {OPTION_TEXT_MAX_LENGTH} characters long."
            raise BlockKitValidationError(msg, field="text")
        return text

    @field_validator("value")
    @classmethod
    def _validate_value(cls, value: str) -> str:
        if len(value) > OPTION_VALUE_MAX_LENGTH:
            msg = f"Value must be at most {OPTION_VALUE_MAX_LENGTH} characters long."
            raise BlockKitValidationError(msg, field="value")
        return value

    @field_validator("description")
    @classmethod
    def _validate_description(cls, description: PlainTextOnlyTextObject | None) -> PlainTextOnlyTextObject | None:
        if description is not None and len(description.text) > OPTION_DESCRIPTION_MAX_LENGTH:
            msg = f"Text must be at most {OPTION_DESCRIPTION_MAX_LENGTH} characters long."
            raise BlockKitValidationError(msg, field="description")
        return description

    @field_validator("url")
    @classmethod
    def _validate_url(cls, url: str | None) -> str | None:
        if url is not None and len(url) > OPTION_URL_MAX_LENGTH:
            msg = f"Maximum length for the url field is {OPTION_URL_MAX_LENGTH} characters."
            raise BlockKitValidationError(msg, field="url")
        return url

    def set_text(self, text: str) -> Self:
        """表示テキストを設定する"""
        self.text = TextObject(text, OPTION_TEXT_MAX_LENGTH)
        return self

    def set_value(self, value: str) -> Self:
        """選択時に送られる値を設定する"""
        self.value = value
        return self

    def set_description(self, description: str) -> PlainTextOnlyTextObject:
        """説明文を設定する

        他のセッターと異なりselfではなく生成した説明文オブジェクトを返す。
        戻り値に対するset_emoji()などの設定はこのオプションの説明文に反映される。

        Args:
            description: 説明文（最大75文字）

        Returns:
            PlainTextOnlyTextObject: このオプションが保持する説明文オブジェクト
        """
        text_object = PlainTextOnlyTextObject(description, OPTION_DESCRIPTION_MAX_LENGTH)
        self.description = text_object
        return text_object

    def set_url(self, url: str) -> Self:
        """クリック時に開くURLを設定する"""
        self.url = url
        return self

    def matches(self, text: str, value: str) -> bool:
        """表示テキストと値が一致するかを判定する"""
        return self.text.text == text and self.value == value

    def to_dict(self, policy: OptionalFieldPolicy | str = OptionalFieldPolicy.PRESENCE) -> dict[str, Any]:
        description = self.description.to_dict(policy) if self.description is not None else None
        return merge_fields(
            {"value": self.value, "text": self.text.to_dict(policy)},
            {"description": description, "url": self.url},
            policy,
        )
