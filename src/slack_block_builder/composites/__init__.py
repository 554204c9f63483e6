"""Block Kitのcompositeオブジェクト"""

from slack_block_builder.composites.base import BlockKitModel, OptionalFieldPolicy, merge_fields
from slack_block_builder.composites.confirm import ConfirmObject
from slack_block_builder.composites.option import OptionObject
from slack_block_builder.composites.text import PlainTextOnlyTextObject, TextObject

__all__ = [
    "BlockKitModel",
    "ConfirmObject",
    "OptionObject",
    "OptionalFieldPolicy",
    "PlainTextOnlyTextObject",
    "TextObject",
    "merge_fields",
]
