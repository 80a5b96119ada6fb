"""
和暦 (Wareki) の日付を西暦に変換するパッケージ
"""

from wareki_conv.base_class import CalendarDate
from wareki_conv.base_class import Era
from wareki_conv.base_class import NotationKind
from wareki_conv.converter import FieldCountError
from wareki_conv.converter import InvalidCalendarDateError
from wareki_conv.converter import MalformedFieldError
from wareki_conv.converter import UnrecognizedFormatError
from wareki_conv.converter import WarekiError
from wareki_conv.converter import classify
from wareki_conv.converter import convert
from wareki_conv.converter import convert_to_datetime
from wareki_conv.converter import extract_fields
from wareki_conv.utils.jp_year_converter import normalize_width
from wareki_conv.utils.jp_year_converter import resolve_era
from wareki_conv.utils.jp_year_converter import to_western_year

__all__ = [
    # base_class
    "CalendarDate",
    "Era",
    "NotationKind",
    # converter
    "WarekiError",
    "UnrecognizedFormatError",
    "MalformedFieldError",
    "FieldCountError",
    "InvalidCalendarDateError",
    "classify",
    "convert",
    "convert_to_datetime",
    "extract_fields",
    # jp_year_converter
    "normalize_width",
    "resolve_era",
    "to_western_year",
]
