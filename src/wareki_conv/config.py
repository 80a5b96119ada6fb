import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

from wareki_conv.utils.logger_config import LEVEL

LOG_LEVEL_ENV = "WAREKI_LOG_LEVEL"
LOG_FILE_ENV = "WAREKI_LOG_FILE"


class ConfigurationError(Exception):
    """設定関連のエラー."""


class OutputFormat(str, Enum):
    """変換結果の出力形式."""

    ISO = "iso"
    JSON = "json"
    TABLE = "table"


@dataclass
class ConverterConfig:
    """CLIの設定を保持するクラス."""

    output_format: OutputFormat = OutputFormat.ISO
    log_level: LEVEL = LEVEL.WARNING
    log_file: Path | None = None
    input_file: Path | None = None
    encoding: str = "utf-8"
    fail_fast: bool = False

    @classmethod
    def from_dict(cls, args: dict[str, Any]) -> "ConverterConfig":
        """辞書から設定を生成. 未指定の項目は環境変数から補う."""
        try:
            output_format = OutputFormat(str(args.get("output_format") or "iso").lower())
        except ValueError as e:
            msg = f"出力形式が不正です: {args.get('output_format')}"
            raise ConfigurationError(msg) from e

        log_level_name = args.get("log_level") or os.environ.get(LOG_LEVEL_ENV, "WARNING")
        try:
            log_level = LEVEL.from_name(str(log_level_name))
        except ValueError as e:
            raise ConfigurationError(str(e)) from e

        log_file = args.get("log_file") or os.environ.get(LOG_FILE_ENV)
        input_file = args.get("input_file")
        if input_file and not Path(input_file).is_file():
            msg = f"入力ファイルが見つかりません: {input_file}"
            raise ConfigurationError(msg)

        return cls(
            output_format=output_format,
            log_level=log_level,
            log_file=Path(log_file) if log_file else None,
            input_file=Path(input_file) if input_file else None,
            encoding=args.get("encoding") or "utf-8",
            fail_fast=bool(args.get("fail_fast", False)),
        )
