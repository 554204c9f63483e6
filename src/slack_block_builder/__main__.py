import argparse
import logging
import sys
from pathlib import Path

from slack_block_builder.config import load_config
from slack_block_builder.exceptions import BlockKitError
from slack_block_builder.layout import build_checkboxes, load_layout, render_json

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """コマンドライン引数を解析する"""
    parser = argparse.ArgumentParser(
        prog="slack-block-builder",
        description="YAMLのレイアウト定義からSlack Block KitのJSONペイロードを出力する",
    )
    parser.add_argument("layout", type=Path, help="レイアウト定義ファイル（YAML）")
    parser.add_argument("--config", type=Path, default=None, help="アプリケーション設定ファイル（YAML）")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """アプリケーションのエントリーポイント"""
    args = parse_args(argv)

    try:
        config = load_config(args.config)
        logging.getLogger().setLevel(config.log_level)
        logger.debug(
            "Config loaded: optional_field_policy=%s, strict_initial_options=%s",
            config.optional_field_policy.value,
            config.strict_initial_options,
        )

        layout = load_layout(args.layout)
        element = build_checkboxes(layout, strict_initial_options=config.strict_initial_options)
    except (BlockKitError, FileNotFoundError, ValueError) as e:
        logger.error("Failed to build layout: %s", e)
        return 1

    print(render_json(element, config.optional_field_policy, config.json_indent))
    return 0


if __name__ == "__main__":
    sys.exit(main())
