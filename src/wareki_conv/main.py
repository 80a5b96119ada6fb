import json
import sys
from typing import Any

import fire
import structlog
from rich.box import ROUNDED
from rich.console import Console
from rich.table import Table
from rich.text import Text

from wareki_conv.batch import BatchResult
from wareki_conv.batch import WarekiBatchConverter
from wareki_conv.config import ConfigurationError
from wareki_conv.config import ConverterConfig
from wareki_conv.config import OutputFormat
from wareki_conv.converter import WarekiError
from wareki_conv.utils.logger_config import configure_logger

logger = structlog.get_logger(__name__)


class CLIManager:
    """Manages CLI interface and configuration."""

    @staticmethod
    def get_cli_args(argv: list[str] | None = None) -> dict[str, Any]:
        """Get CLI arguments."""
        args: dict[str, Any] = {}

        def cli_interface(
            *dates: str,
            input_file: str | None = None,
            output_format: str = "iso",
            log_level: str | None = None,
            log_file: str | None = None,
            encoding: str = "utf-8",
            fail_fast: bool = False,
        ) -> None:
            args.update(
                {
                    # fire は値をリテラルとして解釈するので文字列に戻す
                    "dates": [str(date) for date in dates],
                    "input_file": input_file,
                    "output_format": output_format,
                    "log_level": log_level,
                    "log_file": log_file,
                    "encoding": encoding,
                    "fail_fast": fail_fast,
                },
            )

        fire.Fire(cli_interface, command=argv, name="wareki-conv")
        return args

    @staticmethod
    def create_config(argv: list[str] | None = None) -> tuple[ConverterConfig, list[str]]:
        """Create configuration from CLI args."""
        args = CLIManager.get_cli_args(argv)
        config = ConverterConfig.from_dict(args)
        dates = args.get("dates", [])
        if not dates and config.input_file is None:
            msg = "変換する和暦を引数または --input_file で指定してください"
            raise ConfigurationError(msg)
        return config, dates


class ResultPrinter:
    """変換結果を出力するクラス."""

    def __init__(self, output_format: OutputFormat) -> None:
        self.output_format = output_format
        self.console = Console()

    def show(self, result: BatchResult) -> None:
        if self.output_format is OutputFormat.JSON:
            print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
        elif self.output_format is OutputFormat.TABLE:
            self.console.print(self.create_result_table(result))
        else:
            for record in result.records:
                value = record.date.isoformat() if record.date else f"ERROR: {record.error}"
                print(f"{record.source}\t{value}")

    def create_result_table(self, result: BatchResult) -> Table:
        """変換結果テーブルを作成."""
        summary = result.to_dict()["summary"]
        table = Table(
            box=ROUNDED,
            show_header=True,
            header_style="bold cyan",
            border_style="blue",
            title="和暦変換結果",
            title_style="bold cyan",
            caption=f"成功 {summary['succeeded']} / 失敗 {summary['failed']} / 合計 {summary['total']}",
        )

        table.add_column("No.", justify="right", style="cyan")
        table.add_column("和暦", style="green")
        table.add_column("西暦", justify="center")
        table.add_column("エラー", style="red")

        for idx, record in enumerate(result.records, start=1):
            if record.ok and record.date:
                table.add_row(str(idx), record.source, Text(record.date.isoformat(), style="bold green"), "")
            else:
                table.add_row(str(idx), record.source, Text("✗", style="bold red"), record.error or "")

        return table


def run(config: ConverterConfig, dates: list[str]) -> BatchResult:
    """引数と入力ファイルの和暦を変換."""
    converter = WarekiBatchConverter(fail_fast=config.fail_fast)
    result = converter.convert_all(dates)
    if config.input_file is not None:
        result.extend(converter.convert_file(config.input_file, config.encoding))
    return result


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    try:
        configure_logger()
        config, dates = CLIManager.create_config(argv)
        configure_logger(config.log_level, config.log_file)
        logger.debug("Configuration loaded", config=vars(config))

        result = run(config, dates)
        ResultPrinter(config.output_format).show(result)

    except (WarekiError, ConfigurationError) as e:
        logger.error(str(e))
        sys.exit(1)
    except Exception:
        logger.exception("Unexpected error occurred")
        sys.exit(1)

    if result.failed:
        sys.exit(1)


if __name__ == "__main__":
    main()
