from collections.abc import Iterable
from dataclasses import dataclass
from dataclasses import field
from pathlib import Path
from typing import Any

import structlog

from wareki_conv.base_class import CalendarDate
from wareki_conv.converter import WarekiError
from wareki_conv.converter import convert_to_datetime

logger = structlog.get_logger(__name__)

COMMENT_PREFIX = "#"


@dataclass
class ConversionRecord:
    """1件分の変換結果."""

    source: str
    date: CalendarDate | None = None
    error: str | None = None
    stage: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict[str, Any]:
        return {
            "source": self.source,
            "date": self.date.isoformat() if self.date else None,
            "error": self.error,
            "stage": self.stage,
        }


@dataclass
class BatchResult:
    """一括変換の結果を保持するクラス."""

    records: list[ConversionRecord] = field(default_factory=list)

    def add(self, record: ConversionRecord) -> None:
        self.records.append(record)

    def extend(self, other: "BatchResult") -> None:
        self.records.extend(other.records)

    @property
    def succeeded(self) -> list[ConversionRecord]:
        return [record for record in self.records if record.ok]

    @property
    def failed(self) -> list[ConversionRecord]:
        return [record for record in self.records if not record.ok]

    def to_dict(self) -> dict[str, Any]:
        """結果を辞書形式で取得."""
        return {
            "records": [record.to_dict() for record in self.records],
            "summary": self._create_summary(),
        }

    def _create_summary(self) -> dict[str, int]:
        """サマリー情報を生成."""
        return {
            "total": len(self.records),
            "succeeded": len(self.succeeded),
            "failed": len(self.failed),
        }


class WarekiBatchConverter:
    """複数の和暦をまとめて変換するクラス."""

    def __init__(self, fail_fast: bool = False) -> None:
        self.fail_fast = fail_fast

    def convert_one(self, source: str) -> ConversionRecord:
        """1件を変換. 存在しない日付もエラーとして扱う."""
        try:
            converted = convert_to_datetime(source)
        except WarekiError as e:
            if self.fail_fast:
                raise
            logger.warning("Conversion failed", source=source, stage=e.stage, error=str(e))
            return ConversionRecord(source=source, error=str(e), stage=e.stage)
        return ConversionRecord(source=source, date=CalendarDate(converted.year, converted.month, converted.day))

    def convert_all(self, sources: Iterable[str]) -> BatchResult:
        """空行と # で始まる行は読み飛ばす."""
        result = BatchResult()
        for line in sources:
            source = line.strip()
            if not source or source.startswith(COMMENT_PREFIX):
                continue
            result.add(self.convert_one(source))

        logger.info("Batch conversion completed", summary=result.to_dict()["summary"])
        return result

    def convert_file(self, path: Path, encoding: str = "utf-8") -> BatchResult:
        """テキストファイルの各行を変換."""
        try:
            lines = path.read_text(encoding=encoding).splitlines()
        except (FileNotFoundError, OSError) as e:
            msg = f"入力ファイルの読み込みに失敗: {e}"
            raise type(e)(msg) from e
        return self.convert_all(lines)
