"""Block Kit構築に関する例外"""


class BlockKitError(Exception):
    """Block Kit関連のエラーの基底クラス"""


class BlockKitValidationError(BlockKitError, ValueError):
    """フィールドの制約（文字数・件数など）に違反した場合のエラー"""

    def __init__(self, message: str, field: str | None = None) -> None:
        """初期化

        Args:
            message: エラーメッセージ
            field: 違反したフィールド名（特定できない場合はNone）
        """
        super().__init__(message)
        self.field = field
