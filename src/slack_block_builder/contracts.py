"""Block Kitオブジェクトが満たすインターフェース"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from slack_block_builder.composites.base import OptionalFieldPolicy


@runtime_checkable
class BlockKitObject(Protocol):
    """Slack APIのワイヤ形式の辞書に変換できるオブジェクトのProtocol"""

    def to_dict(self, policy: OptionalFieldPolicy | str = ...) -> dict[str, Any]: ...
