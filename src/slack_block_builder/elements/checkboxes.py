"""Block Kitのチェックボックス要素"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Literal, Self

from pydantic import Field, field_validator, model_validator

from slack_block_builder.composites.base import BlockKitModel, OptionalFieldPolicy, merge_fields
from slack_block_builder.composites.confirm import ConfirmObject
from slack_block_builder.composites.option import OptionObject
from slack_block_builder.exceptions import BlockKitValidationError

ACTION_ID_MAX_LENGTH = 255
MAX_OPTIONS = 10


class CheckboxesElement(BlockKitModel):
    """チェックボックスグループ

    optionsは最大10件で、追加のたびに件数を検証する。options・initial_optionsはタプルで保持し、
    add_option()などのメソッド経由でのみ追加できる。

    strict_initial_optionsがTrue（デフォルト）の場合、initial_optionsは
    optionsに含まれる選択肢のみ・最大10件に制限される。Falseの場合は
    検証せずにそのまま追加する。
    追加後の選択肢を直接書き換えた場合に備え、to_dict()でも一致を再検証する。
    """

    type: Literal["checkboxes"] = "checkboxes"
    action_id: str | None = None
    options: tuple[OptionObject, ...] = Field(default_factory=tuple, max_length=MAX_OPTIONS)
    initial_options: tuple[OptionObject, ...] | None = None
    confirm: ConfirmObject | None = None
    focus_on_load: bool | None = None
    strict_initial_options: bool = Field(default=True, exclude=True)

    @field_validator("action_id")
    @classmethod
    def _validate_action_id(cls, action_id: str | None) -> str | None:
        if action_id is not None and len(action_id) > ACTION_ID_MAX_LENGTH:
            msg = f"The maximum length of an action ID is {ACTION_ID_MAX_LENGTH} characters."
            raise BlockKitValidationError(msg, field="action_id")
        return action_id

    @model_validator(mode="after")
    def _validate_initial_options(self) -> Self:
        self._check_initial_options()
        return self

    def _check_initial_options(self) -> None:
        if not self.strict_initial_options or self.initial_options is None:
            return
        if len(self.initial_options) > MAX_OPTIONS:
            msg = f"A maximum of {MAX_OPTIONS} initial options are allowed."
            raise BlockKitValidationError(msg, field="initial_options")
        for initial in self.initial_options:
            if self._find_option(initial.text.text, initial.value) is None:
                msg = f"Initial option {initial.value!r} does not match any of the options."
                raise BlockKitValidationError(msg, field="initial_options")

    def _find_option(self, text: str, value: str) -> OptionObject | None:
        for option in self.options:
            if option.matches(text, value):
                return option
        return None

    def set_action_id(self, action_id: str) -> Self:
        """インタラクション時にアプリへ送られるaction_idを設定する（最大255文字）"""
        self.action_id = action_id
        return self

    def add_option(
        self,
        text: str,
        value: str,
        *,
        description: str | None = None,
        url: str | None = None,
    ) -> Self:
        """選択肢を末尾に追加する

        Raises:
            BlockKitValidationError: 既に10件ある場合、または各フィールドが制約に違反する場合
        """
        if len(self.options) >= MAX_OPTIONS:
            msg = f"A maximum of {MAX_OPTIONS} options are allowed."
            raise BlockKitValidationError(msg, field="options")

        option = OptionObject(text, value)
        if description is not None:
            option.set_description(description)
        if url is not None:
            option.set_url(url)

        self.options = (*self.options, option)
        return self

    def add_initial_option(self, text: str, value: str) -> Self:
        """初期状態で選択済みにする選択肢を追加する

        strict_initial_optionsがTrueの場合、一致する選択肢を先にadd_option()で
        追加しておく必要がある。出力される選択肢は一致したoptionsの複製になる。

        Raises:
            BlockKitValidationError: optionsに一致する選択肢がない場合、または既に10件ある場合
        """
        current = self.initial_options or ()
        if not self.strict_initial_options:
            self.initial_options = (*current, OptionObject(text, value))
            return self

        if len(current) >= MAX_OPTIONS:
            msg = f"A maximum of {MAX_OPTIONS} initial options are allowed."
            raise BlockKitValidationError(msg, field="initial_options")
        matched = self._find_option(text, value)
        if matched is None:
            msg = f"Initial option {value!r} does not match any of the options."
            raise BlockKitValidationError(msg, field="initial_options")

        self.initial_options = (*current, matched.model_copy(deep=True))
        return self

    def set_confirm(self, configure: Callable[[ConfirmObject], object]) -> Self:
        """確認ダイアログを設定する

        生成したConfirmObjectをconfigureに渡して同期的に呼び出し、
        例外なく戻った場合のみ保持する。

        Args:
            configure: ConfirmObjectを受け取り設定するコールバック
        """
        confirm = ConfirmObject()
        configure(confirm)
        self.confirm = confirm
        return self

    def set_focus_on_load(self, focus_on_load: bool = True) -> Self:
        """ビューの表示時にこの要素へフォーカスするかを設定する"""
        self.focus_on_load = focus_on_load
        return self

    def to_dict(self, policy: OptionalFieldPolicy | str = OptionalFieldPolicy.PRESENCE) -> dict[str, Any]:
        self._check_initial_options()

        required: dict[str, Any] = {"type": self.type}
        if self.action_id is not None:
            required["action_id"] = self.action_id
        required["options"] = [option.to_dict(policy) for option in self.options]

        initial_options = None
        if self.initial_options is not None:
            initial_options = [option.to_dict(policy) for option in self.initial_options]

        return merge_fields(
            required,
            {
                "initial_options": initial_options,
                "confirm": self.confirm.to_dict(policy) if self.confirm is not None else None,
                "focus_on_load": self.focus_on_load,
            },
            policy,
        )
