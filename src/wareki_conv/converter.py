"""和暦 (JIS X 0301 および漢字表記) の日付を西暦に変換する.

JIS X 0301 の表記に加えて次の表記も受け付ける.

* 全角の数字・英字 (「Ｒ０１．０２．０３」)
* 0埋めなしの値 (「R1.2.3」)
* 元年表記 (「令和元年5月1日」)

各元号の初日は1月1日ではないが (平成は1月8日から)、ここでは考慮しない.
入力された年がその元号の範囲内であるとみなして計算する.
"""

import re
from datetime import datetime

import structlog

from wareki_conv.base_class import CalendarDate
from wareki_conv.base_class import Era
from wareki_conv.base_class import NotationKind
from wareki_conv.utils.jp_year_converter import JapaneseCalendarConverter

logger = structlog.get_logger(__name__)

SEPARATOR = "."
DAY_UNIT = "日"
NARRATIVE_PATTERN = re.compile(
    r"(?:" + "|".join(era.kanji_name for era in Era) + r")(?:[0-9]+|元)年[0-9]+月[0-9]+日",
)


class WarekiError(Exception):
    """和暦変換の基本例外."""

    stage = "convert"

    def __init__(self, message: str, wareki: str | None = None) -> None:
        super().__init__(message)
        self.wareki = wareki


class UnrecognizedFormatError(WarekiError):
    """どの表記にも一致しない場合の例外."""

    stage = "classify"


class MalformedFieldError(WarekiError):
    """年・月・日を数値として読めない場合の例外."""

    stage = "extract"
    internal = False


class FieldCountError(MalformedFieldError):
    """年月日が3つに分割できなかった場合の例外. 分類処理の不具合を示す."""

    internal = True


class InvalidCalendarDateError(WarekiError):
    """存在しない日付の場合の例外."""

    stage = "calendar"


def classify(normalized: str) -> NotationKind:
    """正規化済みの文字列から表記の種類を判定."""
    segments = normalized.split(SEPARATOR)

    if len(segments) == 1:
        if NARRATIVE_PATTERN.fullmatch(normalized):
            return NotationKind.KANJI_NARRATIVE
        msg = f"和暦の形式を認識できません: {normalized}"
        raise UnrecognizedFormatError(msg, normalized)

    if len(segments) != 3:
        msg = f"区切りの数が不正です ({len(segments)}要素): {normalized}"
        raise UnrecognizedFormatError(msg, normalized)

    head = segments[0][:1]
    if head.isascii() and head.isdigit():
        return NotationKind.NUMERIC_DOTTED
    era = Era.from_marker(head)
    if era is not None and head == era.marker:
        return NotationKind.MARKER_DOTTED
    if era is not None and head == era.kanji_marker:
        return NotationKind.KANJI_MARKER_DOTTED

    msg = f"元号の略号を認識できません: {head or normalized}"
    raise UnrecognizedFormatError(msg, normalized)


def _split_fields(normalized: str, kind: NotationKind) -> list[str]:
    body = normalized[kind.marker_length :]
    if kind is not NotationKind.KANJI_NARRATIVE:
        return body.split(SEPARATOR)

    body = body.replace(DAY_UNIT, "")
    return "".join(ch if ch.isascii() and ch.isdigit() else SEPARATOR for ch in body).split(SEPARATOR)


def _parse_field(field: str, wareki: str) -> int:
    if not (field.isascii() and field.isdigit()):
        msg = f"数値として読めない値があります: {field!r}"
        raise MalformedFieldError(msg, wareki)
    try:
        return int(field)
    except ValueError as e:
        # 桁数が多すぎる値は int の上限で失敗する
        msg = f"数値として読めない値があります ({len(field)}桁)"
        raise MalformedFieldError(msg, wareki) from e


def extract_fields(normalized: str, kind: NotationKind) -> tuple[int, int, int]:
    """元号での年・月・日を取り出す."""
    normalized = JapaneseCalendarConverter.replace_first_year(normalized)
    fields = _split_fields(normalized, kind)
    if len(fields) != 3:
        msg = f"年月日の要素数が3ではありません ({len(fields)}要素): {normalized}"
        raise FieldCountError(msg, normalized)
    year, month, day = (_parse_field(field, normalized) for field in fields)
    return year, month, day


def convert(wareki: str) -> CalendarDate:
    """和暦を西暦の年月日に変換.

    Examples:
        >>> convert("明治元年2月3日")
        CalendarDate(year=1868, month=2, day=3)
        >>> convert("令01.02.03")
        CalendarDate(year=2019, month=2, day=3)
    """
    normalized = JapaneseCalendarConverter.normalize_width(wareki.strip())
    normalized = JapaneseCalendarConverter.replace_first_year(normalized)

    kind = classify(normalized)
    era = JapaneseCalendarConverter.resolve_era(normalized)
    era_year, month, day = extract_fields(normalized, kind)

    result = CalendarDate(JapaneseCalendarConverter.to_western_year(era, era_year), month, day)
    logger.debug("Converted wareki", wareki=wareki, notation=kind.value, era=era.display_name, date=result)
    return result


def convert_to_datetime(wareki: str) -> datetime:
    """和暦をUTCの0時の datetime に変換."""
    calendar_date = convert(wareki)
    try:
        return calendar_date.to_datetime()
    except (ValueError, OverflowError) as e:
        msg = f"存在しない日付です: {calendar_date.isoformat()} ({e})"
        raise InvalidCalendarDateError(msg, wareki) from e
