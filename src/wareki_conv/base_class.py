from dataclasses import dataclass
from datetime import datetime
from datetime import timezone
from enum import Enum
from typing import Optional


class Era(Enum):
    """日本の元号 (明治以降)."""

    MEIJI = ("Meiji", "明治", "M", "明", 1868)
    TAISHO = ("Taisho", "大正", "T", "大", 1912)
    SHOWA = ("Showa", "昭和", "S", "昭", 1926)
    HEISEI = ("Heisei", "平成", "H", "平", 1989)
    REIWA = ("Reiwa", "令和", "R", "令", 2019)

    def __init__(self, display_name: str, kanji_name: str, marker: str, kanji_marker: str, start_year: int) -> None:
        self.display_name = display_name
        self.kanji_name = kanji_name
        self.marker = marker
        self.kanji_marker = kanji_marker
        self.start_year = start_year

    @classmethod
    def current(cls) -> "Era":
        """最新の元号."""
        return cls.REIWA

    @classmethod
    def from_marker(cls, char: str) -> Optional["Era"]:
        """略号 (M/T/S/H/R) または漢字一文字 (明/大/昭/平/令) から元号を取得."""
        for era in cls:
            if char in (era.marker, era.kanji_marker):
                return era
        return None


class NotationKind(Enum):
    """和暦表記の種類.

    | 種類                  | 例              |
    | :-------------------- | :-------------- |
    | NUMERIC_DOTTED        | `01.02.03`      |
    | MARKER_DOTTED         | `R01.02.03`     |
    | KANJI_MARKER_DOTTED   | `令01.02.03`    |
    | KANJI_NARRATIVE       | `令和1年2月3日` |

    JIS X 0301 では各値を0埋めの2桁で表記するが、実際の文書では守られない
    ことも多いため0埋めなしも受け付ける.
    """

    NUMERIC_DOTTED = "numeric_dotted"
    MARKER_DOTTED = "marker_dotted"
    KANJI_MARKER_DOTTED = "kanji_marker_dotted"
    KANJI_NARRATIVE = "kanji_narrative"

    @property
    def marker_length(self) -> int:
        """年の数値の前にある元号部分の文字数."""
        if self is NotationKind.NUMERIC_DOTTED:
            return 0
        if self is NotationKind.KANJI_NARRATIVE:
            return 2
        return 1


@dataclass(frozen=True)
class CalendarDate:
    """西暦の年月日. 月日の範囲チェックは行わない."""

    year: int
    month: int
    day: int

    def to_datetime(self) -> datetime:
        """UTCの0時として datetime を生成. 存在しない日付は ValueError、桁外れの年は OverflowError."""
        return datetime(self.year, self.month, self.day, tzinfo=timezone.utc)

    def isoformat(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"
