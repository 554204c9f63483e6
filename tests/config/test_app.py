"""アプリケーション設定のテスト"""

from pathlib import Path

import pytest

from slack_block_builder.composites.base import OptionalFieldPolicy
from slack_block_builder.config.app import AppConfig, load_app_config


class TestAppConfig:
    """AppConfig Pydanticモデルのテスト"""

    def test_default_values(self) -> None:
        """デフォルト値が設定されること"""
        config = AppConfig()
        assert config.optional_field_policy is OptionalFieldPolicy.PRESENCE
        assert config.strict_initial_options is True
        assert config.json_indent == 2

    def test_policy_from_string(self) -> None:
        """文字列からpolicyを設定できること"""
        config = AppConfig(optional_field_policy="truthy")
        assert config.optional_field_policy is OptionalFieldPolicy.TRUTHY

    def test_invalid_policy(self) -> None:
        """未知のpolicyはエラーになること"""
        with pytest.raises(ValueError):
            AppConfig(optional_field_policy="always")

    def test_negative_indent(self) -> None:
        """負のインデントはエラーになること"""
        with pytest.raises(ValueError):
            AppConfig(json_indent=-1)

    def test_extra_fields_forbidden(self) -> None:
        """未定義のフィールドはエラーになること"""
        with pytest.raises(ValueError):
            AppConfig(unknown_field="value")


class TestLoadAppConfig:
    """load_app_config関数のテスト"""

    def test_load_from_yaml(self, tmp_path: Path) -> None:
        """YAMLファイルから正しく読み込めること"""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("optional_field_policy: truthy\nstrict_initial_options: false\njson_indent: null\n")

        config = load_app_config(config_file)
        assert config.optional_field_policy is OptionalFieldPolicy.TRUTHY
        assert config.strict_initial_options is False
        assert config.json_indent is None

    def test_load_with_partial_config(self, tmp_path: Path) -> None:
        """一部の設定のみの場合、残りはデフォルト値になること"""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("json_indent: 4\n")

        config = load_app_config(config_file)
        assert config.json_indent == 4
        assert config.optional_field_policy is OptionalFieldPolicy.PRESENCE

    def test_load_with_empty_file(self, tmp_path: Path) -> None:
        """空ファイルの場合はデフォルト値になること"""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("")

        assert load_app_config(config_file) == AppConfig()

    def test_load_fails_when_file_not_found(self, tmp_path: Path) -> None:
        """ファイルが存在しない場合にエラーになること"""
        with pytest.raises(FileNotFoundError, match="Config file not found"):
            load_app_config(tmp_path / "nonexistent.yaml")

    def test_load_fails_with_invalid_yaml(self, tmp_path: Path) -> None:
        """不正なYAMLの場合にエラーになること"""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("json_indent: [unclosed\n")

        with pytest.raises(ValueError, match="Invalid YAML file"):
            load_app_config(config_file)

    def test_load_fails_with_invalid_value(self, tmp_path: Path) -> None:
        """不正な値の場合にエラーになること"""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("optional_field_policy: sometimes\n")

        with pytest.raises(ValueError, match="Invalid configuration"):
            load_app_config(config_file)
