"""Block Kitのインタラクティブ要素"""

from slack_block_builder.elements.checkboxes import CheckboxesElement

__all__ = [
    "CheckboxesElement",
]
