"""Block Kitオブジェクト共通基盤のテスト"""

import pytest

from slack_block_builder.composites.base import OptionalFieldPolicy, merge_fields
from slack_block_builder.composites.text import TextObject
from slack_block_builder.exceptions import BlockKitValidationError


class TestMergeFields:
    """merge_fields関数のテスト"""

    def test_required_fields_come_first(self) -> None:
        """必須フィールドが任意フィールドより前に並ぶこと"""
        result = merge_fields({"value": "A1", "text": "t"}, {"url": "https://example.com"})
        assert list(result) == ["value", "text", "url"]

    def test_presence_drops_only_none(self) -> None:
        """presenceではNoneのみ除外し、Falseや空リストは残すこと"""
        result = merge_fields(
            {"type": "checkboxes"},
            {"focus_on_load": False, "initial_options": [], "confirm": None},
            OptionalFieldPolicy.PRESENCE,
        )
        assert result == {"type": "checkboxes", "focus_on_load": False, "initial_options": []}

    def test_truthy_drops_falsy_values(self) -> None:
        """truthyではFalse・空リスト・Noneを除外すること"""
        result = merge_fields(
            {"type": "checkboxes"},
            {"focus_on_load": False, "initial_options": [], "confirm": None, "url": "u"},
            OptionalFieldPolicy.TRUTHY,
        )
        assert result == {"type": "checkboxes", "url": "u"}

    def test_required_fields_are_never_filtered(self) -> None:
        """必須フィールドは値に関わらず残ること"""
        result = merge_fields({"options": []}, {}, OptionalFieldPolicy.TRUTHY)
        assert result == {"options": []}

    def test_policy_accepts_string(self) -> None:
        """policyに文字列を渡せること"""
        assert merge_fields({}, {"focus_on_load": False}, "truthy") == {}
        assert merge_fields({}, {"focus_on_load": False}, "presence") == {"focus_on_load": False}

    def test_unknown_policy_raises(self) -> None:
        """未知のpolicyはValueErrorになること"""
        with pytest.raises(ValueError):
            merge_fields({}, {}, "always")


class TestBlockKitModel:
    """BlockKitModelのエラー変換のテスト"""

    def test_constructor_error_is_translated(self) -> None:
        """生成時のpydanticエラーがBlockKitValidationErrorに変換されること"""
        with pytest.raises(BlockKitValidationError, match="Input should be 'plain_text' or 'mrkdwn'") as exc_info:
            TextObject("hello", type="html")
        assert exc_info.value.field == "type"

    def test_assignment_error_is_translated(self) -> None:
        """代入時のpydanticエラーがBlockKitValidationErrorに変換されること"""
        text = TextObject("hello")
        with pytest.raises(BlockKitValidationError):
            text.type = "html"  # type: ignore[assignment]
        assert text.type == "plain_text"

    def test_unknown_field_is_rejected(self) -> None:
        """未定義のフィールドは受け付けないこと"""
        with pytest.raises(BlockKitValidationError):
            TextObject("hello", color="red")

    def test_custom_validator_message_is_kept(self) -> None:
        """バリデータが送出したメッセージとfieldがそのまま伝わること"""
        with pytest.raises(BlockKitValidationError, match="Text must be at most 5 characters long.") as exc_info:
            TextObject("too long", 5)
        assert exc_info.value.field == "text"

    def test_rejected_assignment_restores_previous_value(self) -> None:
        """代入後の検証で拒否された場合、フィールドが代入前の値に戻ること"""
        text = TextObject("abc", 5)
        with pytest.raises(BlockKitValidationError, match="Text must be at most 5 characters long."):
            text.text = "x" * 10
        assert text.text == "abc"
        assert text.to_dict() == {"type": "plain_text", "text": "abc"}

    def test_rejected_assignment_keeps_object_usable(self) -> None:
        """拒否された代入の後も有効な値を代入できること"""
        text = TextObject("abc", 5)
        with pytest.raises(BlockKitValidationError):
            text.text = "x" * 10
        text.text = "ok"
        assert text.text == "ok"
