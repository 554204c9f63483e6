"""Block Kit例外クラスのテスト"""

from slack_block_builder.exceptions import BlockKitError, BlockKitValidationError


def test_block_kit_error_is_exception() -> None:
    """BlockKitErrorがExceptionを継承していること"""
    assert issubclass(BlockKitError, Exception)


def test_validation_error_inherits_block_kit_error() -> None:
    """BlockKitValidationErrorがBlockKitErrorを継承していること"""
    assert issubclass(BlockKitValidationError, BlockKitError)


def test_validation_error_is_value_error() -> None:
    """BlockKitValidationErrorがValueErrorとしても捕捉できること"""
    assert issubclass(BlockKitValidationError, ValueError)


def test_validation_error_stores_field() -> None:
    """BlockKitValidationErrorがfieldを保持すること"""
    error = BlockKitValidationError("Value must be at most 75 characters long.", field="value")
    assert error.field == "value"
    assert str(error) == "Value must be at most 75 characters long."


def test_validation_error_field_defaults_to_none() -> None:
    """fieldを省略した場合はNoneになること"""
    assert BlockKitValidationError("invalid").field is None
