"""Block Kitのテキストオブジェクト"""

from __future__ import annotations

from typing import Any, Literal, Self

from pydantic import Field, model_validator

from slack_block_builder.composites.base import BlockKitModel, OptionalFieldPolicy, merge_fields
from slack_block_builder.exceptions import BlockKitValidationError

DEFAULT_TEXT_MAX_LENGTH = 3000


def _check_text_length(text: str, min_length: int, max_length: int) -> None:
    if len(text) > max_length:
        msg = f"Text must be at most {max_length} characters long."
        raise BlockKitValidationError(msg, field="text")
    if len(text) < min_length:
        msg = f"Text must be at least {min_length} character(s) long."
        raise BlockKitValidationError(msg, field="text")


class TextObject(BlockKitModel):
    """文字数制限付きのテキストオブジェクト

    文字数はインスタンス生成時に検証され、制限を超えた時点でBlockKitValidationErrorになる。
    max_length/min_lengthは検証用の設定値で、生成後は変更できず出力にも含まれない。

    Examples:
        >>> TextObject("Option A", 75).to_dict()
        {'type': 'plain_text', 'text': 'Option A'}
    """

    type: Literal["plain_text", "mrkdwn"] = "plain_text"
    text: str
    emoji: bool | None = None
    verbatim: bool | None = None
    max_length: int = Field(default=DEFAULT_TEXT_MAX_LENGTH, gt=0, exclude=True, frozen=True)
    min_length: int = Field(default=0, ge=0, exclude=True, frozen=True)

    def __init__(
        self,
        text: str,
        max_length: int = DEFAULT_TEXT_MAX_LENGTH,
        min_length: int = 0,
        **data: Any,
    ) -> None:
        super().__init__(text=text, max_length=max_length, min_length=min_length, **data)

    @model_validator(mode="after")
    def _validate_constraints(self) -> Self:
        _check_text_length(self.text, self.min_length, self.max_length)
        if self.emoji is not None and self.type != "plain_text":
            msg = "The emoji field is only usable with plain_text text objects."
            raise BlockKitValidationError(msg, field="emoji")
        if self.verbatim is not None and self.type != "mrkdwn":
            msg = "The verbatim field is only usable with mrkdwn text objects."
            raise BlockKitValidationError(msg, field="verbatim")
        return self

    def plain_text(self) -> Self:
        """テキストの種別をplain_textにする"""
        if self.verbatim is not None:
            msg = "The verbatim field is only usable with mrkdwn text objects."
            raise BlockKitValidationError(msg, field="type")
        self.type = "plain_text"
        return self

    def markdown(self) -> Self:
        """テキストの種別をmrkdwnにする"""
        if self.emoji is not None:
            msg = "The emoji field is only usable with plain_text text objects."
            raise BlockKitValidationError(msg, field="type")
        self.type = "mrkdwn"
        return self

    def set_emoji(self, emoji: bool = True) -> Self:
        """絵文字コロン記法のエスケープ有無を設定する（plain_textのみ）"""
        if self.type != "plain_text":
            msg = "The emoji field is only usable with plain_text text objects."
            raise BlockKitValidationError(msg, field="emoji")
        self.emoji = emoji
        return self

    def set_verbatim(self, verbatim: bool = True) -> Self:
        """URLやメンションの自動リンクを無効にするかを設定する（mrkdwnのみ）"""
        if self.type != "mrkdwn":
            msg = "The verbatim field is only usable with mrkdwn text objects."
            raise BlockKitValidationError(msg, field="verbatim")
        self.verbatim = verbatim
        return self

    def to_dict(self, policy: OptionalFieldPolicy | str = OptionalFieldPolicy.PRESENCE) -> dict[str, Any]:
        return merge_fields(
            {"type": self.type, "text": self.text},
            {"emoji": self.emoji, "verbatim": self.verbatim},
            policy,
        )


class PlainTextOnlyTextObject(TextObject):
    """plain_textに限定したテキストオブジェクト

    description・confirmダイアログのボタンなど、mrkdwnを受け付けないフィールドで使う。
    """

    type: Literal["plain_text"] = "plain_text"

    def markdown(self) -> Self:
        msg = "This text object must be plain_text."
        raise BlockKitValidationError(msg, field="type")
